from typing import cast

from attrs import define, field
from attrs.validators import instance_of, matches_re
from aws_cdk import (
    CfnOutput,
    Fn,
    RemovalPolicy,
    Stack,
    aws_apigatewayv2 as apigwv2,
    aws_apigatewayv2_integrations as apigwv2_integrations,
    aws_iam as iam,
    aws_lambda as _lambda,
    aws_logs as logs,
    aws_s3 as s3,
    aws_s3_deployment as s3deploy,
)
from constructs import Construct

import common.constants as constants
from common.stack_context import StackContext


@define(slots=True, kw_only=True, frozen=True)
class LambdaFunctionProps:
    path: str = field(validator=instance_of(str))  # Local directory packaged as the function code
    handler: str = field(default=constants.LAMBDA_HANDLER, validator=instance_of(str))
    runtime: _lambda.Runtime = field(default=constants.PYTHON_RUNTIME)
    stage_name: str = field(validator=matches_re(r"^[a-z0-9-]+$"))
    version: str = field(validator=instance_of(str))


class LambdaStack(Stack):

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        config: LambdaFunctionProps,
        deploy_env: str = constants.DEFAULT_ENV,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)
        self.config = config
        self.context = StackContext(
            scope=self,
            service=constants.LAMBDA_SERVICE_NAME,
            component=config.stage_name,
            env=deploy_env,
        )

        # S3 bucket holding the zipped function code
        self.artifact_bucket = self._build_artifact_bucket()
        self.artifact_deployment = self._build_artifact_deployment(self.artifact_bucket)

        self.role = self._build_execution_role()
        self.log_group = self.context.build_log_group("Function")

        self.function = self._build_function(
            bucket=self.artifact_bucket,
            deployment=self.artifact_deployment,
            role=self.role,
            log_group=self.log_group,
        )

        self.http_api = self._build_api_gateway_http_api(self.function)

        # Output the url for the API endpoint
        CfnOutput(self, f"url-{config.stage_name}", value=self.http_api.api_endpoint)

    # Resource creation

    def _build_artifact_bucket(self) -> s3.Bucket:
        return s3.Bucket(
            self,
            self.context.build_resource_id("Artifacts"),
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            encryption=s3.BucketEncryption.S3_MANAGED,
        )

    def _build_artifact_deployment(self, bucket: s3.IBucket) -> s3deploy.BucketDeployment:
        """Upload the function directory as a single zip under the version prefix."""
        return s3deploy.BucketDeployment(
            self,
            self.context.build_resource_id("Archive"),
            sources=[s3deploy.Source.asset(self.config.path)],
            destination_bucket=bucket,
            destination_key_prefix=f"{self.config.version}/",
            extract=False,
            prune=False,
        )

    def _build_execution_role(self) -> iam.Role:
        """Role assumed by the function; basic execution lets it write CloudWatch logs."""
        return iam.Role(
            self,
            self.context.build_resource_id("Role"),
            role_name=self.context.build_resource_name("Role"),
            assumed_by=iam.ServicePrincipal(constants.LAMBDA_PRINCIPAL),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    constants.LAMBDA_BASIC_EXECUTION_POLICY
                )
            ],
        )

    def _build_function(
        self,
        bucket: s3.IBucket,
        deployment: s3deploy.BucketDeployment,
        role: iam.IRole,
        log_group: logs.ILogGroup,
    ) -> _lambda.Function:
        object_key = self.config.version + "/" + Fn.select(0, deployment.object_keys)
        function = _lambda.Function(
            self,
            self.context.build_resource_id("Function"),
            function_name=self.context.build_resource_name("Function"),
            runtime=self.config.runtime,
            handler=self.config.handler,
            code=_lambda.Code.from_bucket(bucket, object_key),
            role=role,
            architecture=constants.DEFAULT_ARCHITECTURE,
            tracing=_lambda.Tracing.ACTIVE,
            log_group=log_group,
            environment={
                "LOG_LEVEL": "INFO",
                "table": constants.LAMBDA_TABLE_NAME,
            },
        )
        # The object must exist before the function can be created from it
        function.node.add_dependency(deployment)
        return function

    def _build_api_gateway_http_api(self, function: _lambda.Function) -> apigwv2.HttpApi:
        """Create HTTP API whose default route proxies to the function."""
        integration = apigwv2_integrations.HttpLambdaIntegration(
            self.context.build_resource_id("Integration"),
            handler=cast(_lambda.IFunction, function),
        )
        return apigwv2.HttpApi(
            self,
            self.context.build_resource_id("API"),
            api_name=self.context.build_resource_name("API"),
            create_default_stage=True,
            default_integration=integration,
        )
