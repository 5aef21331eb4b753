import json
from config import Config
from deploy_params import ServiceDeployParams
from deploy_processor import DeployProcessor
from ecs_service import ECSService
from utils import logger, extract_deploy_event, to_json_safe

def lambda_handler(event, context):
    """
    Lambda handler which updates the image of one container in the task
    definition a service currently runs, then updates the service.

    Event fields: cluster (optional), service, taskDefinition, containerName,
    imageBase, imageTag (optional). The event may also arrive wrapped in an
    SNS notification.

    Args:
        event (dict): Lambda event
        context (LambdaContext): Lambda context, unused

    Returns:
        dict: Response from update_service

    Raises:
        ValidationError: If required fields are missing
        ServiceNotFoundError: If the service does not exist in the cluster
        botocore.exceptions.ClientError: On any ECS API failure
    """
    logger.info('[LAMBDA_START] ECS Service Image Update invoked')
    config = Config()

    deploy_event = extract_deploy_event(event)
    params = ServiceDeployParams.from_event(
        deploy_event,
        default_cluster=config.default_cluster,
        default_image_tag=config.default_image_tag
    )
    logger.info(f'[EVENT_RECEIVED] Beginning deployment for event: {json.dumps(deploy_event, indent=2)}')

    processor = DeployProcessor(ECSService())
    response = processor.deploy_to_service(params)

    logger.info(f'[LAMBDA_COMPLETE] Service {params.service} updated to {params.image}')
    return to_json_safe(response)
