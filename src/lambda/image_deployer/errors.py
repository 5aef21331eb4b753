class ValidationError(Exception):
    """Raised when a deploy event is missing required fields"""

    def __init__(self, errors):
        """
        Args:
            errors (list): Every missing or invalid field message
        """
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class ServiceNotFoundError(Exception):
    """Raised when describe_services does not return the requested service"""

    def __init__(self, cluster, service, reason=None):
        message = f"Service {service} not found in cluster {cluster}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.cluster = cluster
        self.service = service
        self.reason = reason
