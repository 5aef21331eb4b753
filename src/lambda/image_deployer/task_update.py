import json
from config import Config
from deploy_params import TaskDeployParams
from deploy_processor import DeployProcessor
from ecs_service import ECSService
from utils import logger, extract_deploy_event, to_json_safe

def lambda_handler(event, context):
    """
    Lambda handler which updates the image of one container in a task
    family and, when a service is named, rolls that service onto the new
    revision.

    Event fields: cluster (optional, requires service), service (optional),
    taskFamily, containerName, imageBase, imageTag (optional). The event may
    also arrive wrapped in an SNS notification.

    Args:
        event (dict): Lambda event
        context (LambdaContext): Lambda context, unused

    Returns:
        dict: Response from update_service, or from register_task_definition
        when no service was named
    """
    logger.info('[LAMBDA_START] ECS Task Image Update invoked')
    config = Config()

    deploy_event = extract_deploy_event(event)
    logger.info(f'[EVENT_RECEIVED] Beginning deployment for event: {json.dumps(deploy_event, indent=2)}')
    params = TaskDeployParams.from_event(
        deploy_event,
        default_cluster=config.default_cluster,
        default_image_tag=config.default_image_tag
    )

    processor = DeployProcessor(ECSService())
    response = processor.deploy_task_family(params)

    logger.info(f'[LAMBDA_COMPLETE] Task family {params.task_family} updated to {params.image}')
    return to_json_safe(response)
