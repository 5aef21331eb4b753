from utils import logger

def rewrite_container_image(containers, container_name, image):
    """
    Returns the container definitions with one container's image replaced.

    The container whose name equals container_name is shallow-copied with the
    new image; every other container is returned as is. Neither the input
    list nor its containers are modified.

    Args:
        containers (list): Container definitions, in task order
        container_name (str): Name of the container to update
        image (str): New image reference

    Returns:
        list: Container definitions of the same length and order
    """
    rewritten = [
        dict(container, image=image) if container.get('name') == container_name else container
        for container in containers
    ]

    if not any(container.get('name') == container_name for container in containers):
        # No match leaves the task unchanged; registration still goes ahead
        logger.warning(f"[CONTAINER_NOT_FOUND] No container named {container_name}, image left unchanged")
    return rewritten


class DeployProcessor:
    """Processor for image deployments"""

    def __init__(self, ecs_service):
        """
        Initialize deploy processor.

        Args:
            ecs_service (ECSService): ECS service instance
        """
        self.ecs_service = ecs_service

    def deploy_to_service(self, params):
        """
        Update the task definition a service runs and roll the service onto it.

        Args:
            params (ServiceDeployParams): Deployment parameters

        Returns:
            dict: Response from update_service
        """
        service = self.ecs_service.describe_service(params.cluster, params.service)
        if service['taskDefinition'] != params.task_definition:
            logger.info(f"[TASK_DEFINITION_SOURCE] Using {service['taskDefinition']} from service {params.service} "
                        f"(event named {params.task_definition})")
        task = self.ecs_service.describe_task_definition(service['taskDefinition'])
        registered = self.register_image(params, task)
        return self.update_service(params, registered['taskDefinition'])

    def deploy_task_family(self, params):
        """
        Update a task family, rolling out to a service only when one is named.

        Args:
            params (TaskDeployParams): Deployment parameters

        Returns:
            dict: Response from update_service, or from register_task_definition
            when no service was named
        """
        task = self.ecs_service.describe_task_definition(params.task_family)
        registered = self.register_image(params, task)
        if not params.service:
            logger.info(f"[SERVICE_UPDATE_SKIPPED] No service named, task family {params.task_family} updated only")
            return registered
        return self.update_service(params, registered['taskDefinition'])

    def register_image(self, params, task):
        """
        Register a revision of task with params.image in the target container.

        Args:
            params (DeployParams): Deployment parameters
            task (dict): Source task definition

        Returns:
            dict: Response from register_task_definition
        """
        logger.info(f"[TASK_UPDATE] Setting {params.container_name} to {params.image} in {task.get('taskDefinitionArn')}")
        containers = rewrite_container_image(task['containerDefinitions'], params.container_name, params.image)
        return self.ecs_service.register_task_definition(task, containers)

    def update_service(self, params, new_task):
        """
        Point the service at a newly registered task definition.

        A failure leaves the new revision registered but unused; its ARN is
        logged before the error is re-raised.
        """
        new_task_arn = new_task['taskDefinitionArn']
        try:
            return self.ecs_service.update_service(params.cluster, params.service, new_task_arn)
        except Exception:
            logger.error(f"[ORPHANED_TASK_DEFINITION] {new_task_arn} was registered but service "
                         f"{params.service} was not updated")
            raise
