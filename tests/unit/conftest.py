import os

import boto3
import pytest
from botocore.stub import Stubber


@pytest.fixture(scope="module", autouse=True)
def aws_credentials():
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture(autouse=True)
def clean_deploy_env(monkeypatch):
    for key in ("DEFAULT_CLUSTER", "DEFAULT_IMAGE_TAG", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def ecs_client():
    return boto3.client("ecs", region_name="us-east-1")


@pytest.fixture
def ecs_stub(ecs_client):
    stub = Stubber(ecs_client)
    stub.activate()
    yield stub
    stub.deactivate()


TASK_ROLE_ARN = "arn:aws:iam::123456789012:role/app-task"
APP_3_ARN = "arn:aws:ecs:us-east-1:123456789012:task-definition/app:3"
APP_4_ARN = "arn:aws:ecs:us-east-1:123456789012:task-definition/app:4"
SERVICE_ARN = "arn:aws:ecs:us-east-1:123456789012:service/default/svc"


def container_definitions(web_image="repo/app:v1"):
    return [
        {"name": "proxy", "image": "nginx:1.25", "essential": True},
        {"name": "web", "image": web_image, "essential": True, "cpu": 256},
        {"name": "log-router", "image": "fluent-bit:2", "essential": False},
    ]


def task_definition(arn=APP_3_ARN, revision=3, web_image="repo/app:v1"):
    return {
        "taskDefinitionArn": arn,
        "family": "app",
        "revision": revision,
        "taskRoleArn": TASK_ROLE_ARN,
        "volumes": [{"name": "data"}],
        "containerDefinitions": container_definitions(web_image),
        "status": "ACTIVE",
    }
