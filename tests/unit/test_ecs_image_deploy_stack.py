import aws_cdk as core
import aws_cdk.assertions as assertions

from ecs_image_deploy.config import Config
from ecs_image_deploy.ecs_image_deploy_stack import EcsImageDeployStack


def synth():
    app = core.App()
    stack = EcsImageDeployStack(app, "ecs-image-deploy")
    return assertions.Template.from_stack(stack)


def test_lambda_functions_created():
    template = synth()

    template.resource_count_is("AWS::Lambda::Function", 2)
    template.has_resource_properties("AWS::Lambda::Function", {
        "Handler": "service_update.lambda_handler",
        "FunctionName": "ecs-service-image-update",
        "Environment": {
            "Variables": {
                "DEFAULT_CLUSTER": "default",
                "DEFAULT_IMAGE_TAG": "latest",
                "LOG_LEVEL": "INFO"
            }
        }
    })
    template.has_resource_properties("AWS::Lambda::Function", {
        "Handler": "task_update.lambda_handler",
        "FunctionName": "ecs-task-image-update"
    })


def test_lambda_permissions_cover_the_four_ecs_calls():
    template = synth()

    template.has_resource_properties("AWS::IAM::Policy", {
        "PolicyDocument": {
            "Statement": assertions.Match.array_with([
                assertions.Match.object_like({
                    "Action": [
                        "ecs:DescribeServices",
                        "ecs:DescribeTaskDefinition",
                        "ecs:RegisterTaskDefinition",
                        "ecs:UpdateService"
                    ],
                    "Effect": "Allow",
                    "Resource": "*"
                })
            ])
        }
    })


def test_sns_topics_subscribe_handlers():
    template = synth()

    template.resource_count_is("AWS::SNS::Topic", 2)
    template.resource_count_is("AWS::SNS::Subscription", 2)


def test_sns_topics_can_be_disabled(monkeypatch):
    monkeypatch.setenv("CREATE_SNS_TOPICS", "false")
    template = synth()

    template.resource_count_is("AWS::SNS::Topic", 0)


def test_config_environment_overrides(monkeypatch):
    monkeypatch.setenv("LAMBDA_MEMORY_SIZE", "256")
    monkeypatch.setenv("CREATE_SNS_TOPICS", "False")

    config = Config.get_config()

    assert config["LAMBDA_MEMORY_SIZE"] == "256"
    assert config["CREATE_SNS_TOPICS"] is False
    assert config["DEFAULT_CLUSTER"] == "default"
