from aws_cdk import (
    Duration,
    Stack,
    aws_lambda as lambda_,
    aws_iam as iam,
    aws_sns as sns,
    aws_sns_subscriptions as subscriptions,
    CfnOutput
)
from constructs import Construct
from ecs_image_deploy.config import Config

LAMBDA_ASSET_PATH = "src/lambda/image_deployer"

class EcsImageDeployStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Load configuration
        config = Config.get_config()

        environment = {
            "DEFAULT_CLUSTER": config["DEFAULT_CLUSTER"],
            "DEFAULT_IMAGE_TAG": config["DEFAULT_IMAGE_TAG"],
            "LOG_LEVEL": config["LOG_LEVEL"]
        }

        # Lambda function updating the task definition a service runs (variant 1)
        service_update = lambda_.Function(
            self, "ServiceImageUpdate",
            function_name=config["SERVICE_UPDATE_FUNCTION_NAME"],
            runtime=lambda_.Runtime.PYTHON_3_13,
            code=lambda_.Code.from_asset(LAMBDA_ASSET_PATH),
            handler="service_update.lambda_handler",
            timeout=Duration.seconds(int(config["LAMBDA_TIMEOUT_SECONDS"])),
            memory_size=int(config["LAMBDA_MEMORY_SIZE"]),
            environment=environment,
            description="Updates a container image in a service's task definition and redeploys the service"
        )

        # Lambda function updating a task family, optionally a service (variant 2)
        task_update = lambda_.Function(
            self, "TaskImageUpdate",
            function_name=config["TASK_UPDATE_FUNCTION_NAME"],
            runtime=lambda_.Runtime.PYTHON_3_13,
            code=lambda_.Code.from_asset(LAMBDA_ASSET_PATH),
            handler="task_update.lambda_handler",
            timeout=Duration.seconds(int(config["LAMBDA_TIMEOUT_SECONDS"])),
            memory_size=int(config["LAMBDA_MEMORY_SIZE"]),
            environment=environment,
            description="Updates a container image in a task family and optionally redeploys a service"
        )

        for function in (service_update, task_update):
            # Grant Lambda permissions for the four ECS calls
            function.add_to_role_policy(
                iam.PolicyStatement(
                    actions=[
                        "ecs:DescribeServices",
                        "ecs:DescribeTaskDefinition",
                        "ecs:RegisterTaskDefinition",
                        "ecs:UpdateService"
                    ],
                    resources=["*"]
                )
            )

            # New revisions keep the source task role
            function.add_to_role_policy(
                iam.PolicyStatement(
                    actions=["iam:PassRole"],
                    resources=["*"],
                    conditions={
                        "StringLike": {"iam:PassedToService": "ecs-tasks.amazonaws.com"}
                    }
                )
            )

        # Optional SNS topics so a CI server can publish deploy events
        if config["CREATE_SNS_TOPICS"]:
            service_update_topic = sns.Topic(
                self, "ServiceImageUpdateTopic",
                topic_name=config["SERVICE_UPDATE_TOPIC_NAME"],
                display_name="ECS service image update requests"
            )
            service_update_topic.add_subscription(subscriptions.LambdaSubscription(service_update))

            task_update_topic = sns.Topic(
                self, "TaskImageUpdateTopic",
                topic_name=config["TASK_UPDATE_TOPIC_NAME"],
                display_name="ECS task image update requests"
            )
            task_update_topic.add_subscription(subscriptions.LambdaSubscription(task_update))

            CfnOutput(
                self, "ServiceImageUpdateTopicArn",
                value=service_update_topic.topic_arn,
                description="SNS topic for service image update events"
            )

            CfnOutput(
                self, "TaskImageUpdateTopicArn",
                value=task_update_topic.topic_arn,
                description="SNS topic for task image update events"
            )
