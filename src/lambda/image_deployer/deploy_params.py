from errors import ValidationError

DEFAULT_CLUSTER = 'default'
DEFAULT_IMAGE_TAG = 'latest'


def _missing_fields(event, required_params):
    return [f"{param} is required." for param in required_params if not event.get(param)]


class DeployParams:
    """
    Parameters for a single image deployment.

    Instances are built through ``from_event`` on one of the subclasses and
    are not modified afterwards.

    Attributes:
        cluster (str): Cluster to update, "default" unless given
        service (str): Service to update, may be None for task updates
        container_name (str): Container name within the task to update
        image_base (str): Image name or repository URI
        image_tag (str): Tag to use for the image, "latest" unless given
        image (str): image_base:image_tag
    """

    required_params = ()

    def __init__(self, cluster, service, container_name, image_base, image_tag):
        self.cluster = cluster
        self.service = service
        self.container_name = container_name
        self.image_base = image_base
        self.image_tag = image_tag
        self.image = f"{image_base}:{image_tag}"

    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __repr__(self):
        fields = ", ".join(f"{key}={value!r}" for key, value in self.__dict__.items())
        return f"{type(self).__name__}({fields})"

    @classmethod
    def validate(cls, event):
        """
        Collects every violation in the event.

        Args:
            event (dict): Deploy event

        Returns:
            list: Error messages, empty when the event is valid
        """
        return _missing_fields(event, cls.required_params)

    @classmethod
    def from_event(cls, event, default_cluster=DEFAULT_CLUSTER, default_image_tag=DEFAULT_IMAGE_TAG):
        """
        Builds parameters from a deploy event.

        Raises:
            ValidationError: With every missing or invalid field
        """
        errors = cls.validate(event)
        if errors:
            raise ValidationError(errors)
        return cls._build(event, event.get('cluster') or default_cluster,
                          event.get('imageTag') or default_image_tag)


class ServiceDeployParams(DeployParams):
    """Parameters for updating the task definition currently used by a service"""

    required_params = ('service', 'taskDefinition', 'containerName', 'imageBase')

    def __init__(self, cluster, service, task_definition, container_name, image_base, image_tag):
        self.task_definition = task_definition
        super().__init__(cluster, service, container_name, image_base, image_tag)

    @classmethod
    def _build(cls, event, cluster, image_tag):
        return cls(cluster, event['service'], event['taskDefinition'],
                   event['containerName'], event['imageBase'], image_tag)


class TaskDeployParams(DeployParams):
    """Parameters for updating a task family, optionally rolling out to a service"""

    required_params = ('taskFamily', 'containerName', 'imageBase')

    def __init__(self, cluster, service, task_family, container_name, image_base, image_tag):
        self.task_family = task_family
        super().__init__(cluster, service, container_name, image_base, image_tag)

    @classmethod
    def validate(cls, event):
        errors = super().validate(event)
        if errors:
            return errors
        if event.get('cluster') and not event.get('service'):
            return ["service is required when cluster is specified"]
        return []

    @classmethod
    def _build(cls, event, cluster, image_tag):
        return cls(cluster, event.get('service') or None, event['taskFamily'],
                   event['containerName'], event['imageBase'], image_tag)
