#!/usr/bin/env python3
"""AWS CDK entrypoint for the demo web, VPC/EC2 and Lambda stacks.

All stacks share one deployment environment: the account comes from the CDK
CLI defaults and the region is pinned to eu-west-1. Set EC2_PUBLIC_KEY_PATH to
a local SSH public key to attach a key pair to the trading hub instance.
"""
from typing import Optional

import aws_cdk as cdk
from aws_cdk import Environment
from aws_lambda_powertools import Logger

import common.constants as constants
from common.config import DeploymentSettings
from compute.vpc_ec2_stack import VpcEc2Stack
from networking.web_stack import WebStack
from serverless.lambda_stack import LambdaFunctionProps, LambdaStack

logger = Logger(service=constants.SERVICE_NAME)

LAMBDA_FUNCTIONS = {
    "lambda-hello-world": LambdaFunctionProps(
        path="lambdas/hello_world",
        handler=constants.LAMBDA_HANDLER,
        stage_name="hello-world",
        version="v0.0.3",
    ),
    "lambda-hello-name": LambdaFunctionProps(
        path="lambdas/hello_name",
        handler=constants.LAMBDA_HANDLER,
        stage_name="hello-name",
        version="v0.0.1",
    ),
}


def build_app(settings: DeploymentSettings, app: Optional[cdk.App] = None) -> cdk.App:
    """Attach every stack to the app; all stacks share one environment and tag set."""
    app = app or cdk.App()
    env = Environment(account=settings.account, region=settings.region)
    tags = {"Project": constants.PROJECT_TAG, "Environment": settings.env}

    WebStack(app, constants.WEB_STACK_ID, env=env, tags=tags)
    VpcEc2Stack(
        app,
        constants.VPC_EC2_STACK_ID,
        public_key=settings.read_public_key(),
        env=env,
        tags=tags,
    )
    for stack_id, props in LAMBDA_FUNCTIONS.items():
        LambdaStack(app, stack_id, config=props, deploy_env=settings.env, env=env, tags=tags)
    return app


if __name__ == "__main__":
    build_app(DeploymentSettings.from_env()).synth()
    logger.info("App synth complete")
