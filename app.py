#!/usr/bin/env python3
import aws_cdk as cdk

from ecs_image_deploy.ecs_image_deploy_stack import EcsImageDeployStack

app = cdk.App()
EcsImageDeployStack(app, "EcsImageDeployStack")

app.synth()
