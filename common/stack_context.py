from attrs import define, field
from aws_cdk import CfnTag, RemovalPolicy, Stack, aws_logs as logs
from typing import List, Optional

import common.constants as constants


def _camel(part: str) -> str:
    return "".join(word.capitalize() for word in part.split("-"))


def build_name_tag(name: str) -> List[CfnTag]:
    return [CfnTag(key="Name", value=name)]


@define(slots=True, frozen=True)
class StackContext:
    scope: Stack
    service: str = field(default=constants.SERVICE_NAME)
    component: str = field(default="core")
    env: str = field(
        default=constants.DEFAULT_ENV,
        metadata={"description": "Deployment environment (dev, staging, prod)"},
    )

    # ---------- naming ----------
    def build_resource_name(
        self, resource_type: str, action: Optional[str] = None
    ) -> str:
        """Build resource name with optional action.

        Examples:
            - Without action: lambda-example-hello-world-function-dev
            - With action: lambda-example-hello-world-invoke-permission-dev
        """
        if action:
            return f"{self.service}-{self.component}-{action}-{resource_type}-{self.env}".lower()
        return f"{self.service}-{self.component}-{resource_type}-{self.env}".lower()

    def build_resource_id(self, resource_type: str, action: Optional[str] = None) -> str:
        """Build resource ID with optional action.

        Examples:
            - Without action: LambdaExampleHelloWorldFunction
            - With action: LambdaExampleHelloWorldInvokePermission
        """
        parts = [self.service, self.component, action, resource_type]
        return "".join(_camel(part) for part in parts if part)

    def build_log_group(
        self, function_name: str, action: Optional[str] = None
    ) -> logs.LogGroup:
        return logs.LogGroup(
            self.scope,
            self.build_resource_id("LogGroup", action=action),
            log_group_name=f"/aws/lambda/{self.build_resource_name(function_name, action=action)}",
            removal_policy=RemovalPolicy.DESTROY,
            retention=logs.RetentionDays.ONE_YEAR,
        )
