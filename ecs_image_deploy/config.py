import os
from typing import Dict, Any

class Config:
    """
    Centralized configuration for the ECS Image Deploy CDK Stack.
    Configuration can be overridden using environment variables.
    """

    # Lambda Configuration
    SERVICE_UPDATE_FUNCTION_NAME = "ecs-service-image-update"
    TASK_UPDATE_FUNCTION_NAME = "ecs-task-image-update"
    LAMBDA_TIMEOUT_SECONDS = 60
    LAMBDA_MEMORY_SIZE = 128
    LOG_LEVEL = "INFO"

    # Defaults applied to deploy events
    DEFAULT_CLUSTER = "default"
    DEFAULT_IMAGE_TAG = "latest"

    # SNS Configuration
    CREATE_SNS_TOPICS = True
    SERVICE_UPDATE_TOPIC_NAME = "ecs-service-image-update"
    TASK_UPDATE_TOPIC_NAME = "ecs-task-image-update"

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """
        Returns the configuration with environment variable overrides.

        Environment variables take precedence over default values.
        Overrides of boolean settings accept "true"/"false" in any case.
        """
        config = {}

        # Get all class variables (excluding methods and private variables)
        for key in dir(cls):
            if not key.startswith('_') and not callable(getattr(cls, key)):
                default = getattr(cls, key)
                # Check if environment variable override exists
                env_value = os.environ.get(key)
                if env_value is None:
                    config[key] = default
                elif isinstance(default, bool):
                    config[key] = env_value.strip().lower() in ("1", "true", "yes")
                else:
                    config[key] = env_value

        return config
