import json
import logging
from functools import wraps
from errors import ValidationError

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

def error_handler(func):
    """
    Decorator for consistent error logging across ECS calls.

    The error is logged with the name of the failing function and
    re-raised unchanged so the invocation aborts.

    Args:
        func: The function to wrap with error handling

    Returns:
        The wrapped function with error handling
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"[ERROR] Error in {func.__name__}: {str(e)}")
            raise
    return wrapper

def extract_deploy_event(event):
    """
    Returns the deploy event carried by the Lambda event.

    Events delivered through SNS hold the deploy event as a JSON message
    in the first record; anything else is taken as the deploy event itself.

    Args:
        event (dict): Lambda event

    Returns:
        dict: Deploy event
    """
    records = event.get("Records") or []
    if not records or "Sns" not in records[0]:
        return event

    logger.info("[EVENT_UNWRAP] Extracting deploy event from SNS message")
    message = records[0]["Sns"].get("Message", "")
    try:
        deploy_event = json.loads(message)
    except ValueError:
        deploy_event = None

    if not isinstance(deploy_event, dict):
        raise ValidationError(["SNS message must be a JSON object."])
    return deploy_event

def to_json_safe(response):
    """
    Converts an API response into a JSON serializable dict.

    Args:
        response (dict): boto3 response, may contain datetime values

    Returns:
        dict: Response with non-JSON values rendered as strings
    """
    return json.loads(json.dumps(response, default=str))
