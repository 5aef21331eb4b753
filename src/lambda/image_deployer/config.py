import os
from utils import logger

class Config:
    """Centralized configuration management"""

    def __init__(self):
        """Initialize configuration from environment variables"""
        self.default_cluster = os.environ.get('DEFAULT_CLUSTER') or 'default'
        self.default_image_tag = os.environ.get('DEFAULT_IMAGE_TAG') or 'latest'
        self.log_level = (os.environ.get('LOG_LEVEL') or 'INFO').upper()

        if self.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            logger.error(f"[CONFIG_ERROR] Unknown LOG_LEVEL {self.log_level}, using INFO")
            self.log_level = 'INFO'
        logger.setLevel(self.log_level)
