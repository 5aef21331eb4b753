import boto3
from errors import ServiceNotFoundError
from utils import logger, error_handler

# Fields carried from the source task definition into the new revision
REGISTERED_TASK_FIELDS = ('family', 'volumes', 'taskRoleArn')

class ECSService:
    """Service for ECS operations"""

    def __init__(self, client=None):
        """
        Initialize ECS service.

        Args:
            client (botocore.client.ECS, optional): ECS client. Defaults to a new boto3 client.
        """
        self.client = client if client else boto3.client('ecs')

    @error_handler
    def describe_service(self, cluster, service):
        """
        Get information about a service.

        Args:
            cluster (str): Cluster name or ARN
            service (str): Service name or ARN

        Returns:
            dict: Service information

        Raises:
            ServiceNotFoundError: If the service is not in the cluster
        """
        logger.info(f"[SERVICE_DESCRIBE] Getting information for service {service} in cluster {cluster}")
        response = self.client.describe_services(
            cluster=cluster,
            services=[service]
        )

        if not response.get('services'):
            failures = response.get('failures') or [{}]
            raise ServiceNotFoundError(cluster, service, failures[0].get('reason'))

        logger.info(f"[SERVICE_DESCRIBE_SUCCESS] Service {service} uses {response['services'][0]['taskDefinition']}")
        return response['services'][0]

    @error_handler
    def describe_task_definition(self, task_definition):
        """
        Get a task definition.

        Args:
            task_definition (str): Family, family:revision or full ARN

        Returns:
            dict: Task definition
        """
        logger.info(f"[TASK_DEFINITION_DESCRIBE] Getting task definition {task_definition}")
        response = self.client.describe_task_definition(taskDefinition=task_definition)
        task = response['taskDefinition']
        logger.info(f"[TASK_DEFINITION_DESCRIBE_SUCCESS] Retrieved {task.get('taskDefinitionArn')}")
        return task

    @error_handler
    def register_task_definition(self, task, container_definitions):
        """
        Register a new revision of a task definition.

        Only family, volumes and taskRoleArn are copied from the source task;
        fields the source does not carry are left out of the request.

        Args:
            task (dict): Source task definition
            container_definitions (list): Container definitions for the new revision

        Returns:
            dict: Response from register_task_definition API
        """
        request = {key: task[key] for key in REGISTERED_TASK_FIELDS if task.get(key) is not None}
        request['containerDefinitions'] = container_definitions

        logger.info(f"[TASK_REGISTER_REQUEST] Registering new revision of {task['family']}")
        response = self.client.register_task_definition(**request)
        logger.info(f"[TASK_REGISTERED] New task definition {response['taskDefinition']['taskDefinitionArn']}")
        return response

    @error_handler
    def update_service(self, cluster, service, task_definition_arn):
        """
        Point a service at a task definition revision.

        The rollout itself is left to ECS and not awaited.

        Args:
            cluster (str): Cluster name or ARN
            service (str): Service name or ARN
            task_definition_arn (str): Task definition ARN to deploy

        Returns:
            dict: Response from update_service API
        """
        logger.info(f"[SERVICE_UPDATE_REQUEST] Updating service {service} in cluster {cluster} to {task_definition_arn}")
        response = self.client.update_service(
            cluster=cluster,
            service=service,
            taskDefinition=task_definition_arn
        )
        logger.info(f"[SERVICE_UPDATE_RESPONSE] Service {service} update request sent")
        return response
