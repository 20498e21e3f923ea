import pytest
from aws_cdk import App, Stack
from aws_cdk.assertions import Template

from common.stack_context import StackContext, build_name_tag


@pytest.fixture
def stack() -> Stack:
    return Stack(App(), "TestContextStack")


@pytest.fixture
def context(stack: Stack) -> StackContext:
    return StackContext(scope=stack, service="lambda-example", component="hello-world")


def test_build_resource_name(context: StackContext):
    assert context.build_resource_name("Function") == "lambda-example-hello-world-function-dev"
    assert (
        context.build_resource_name("Permission", action="invoke")
        == "lambda-example-hello-world-invoke-permission-dev"
    )


def test_build_resource_name_uses_env(stack: Stack):
    context = StackContext(scope=stack, service="svc", component="api", env="prod")
    assert context.build_resource_name("Role") == "svc-api-role-prod"


def test_build_resource_id(context: StackContext):
    assert context.build_resource_id("Function") == "LambdaExampleHelloWorldFunction"
    assert (
        context.build_resource_id("Permission", action="invoke")
        == "LambdaExampleHelloWorldInvokePermission"
    )


def test_build_name_tag():
    (tag,) = build_name_tag("DemoDemoVPC")
    assert tag.key == "Name"
    assert tag.value == "DemoDemoVPC"


def test_context_is_frozen(context: StackContext):
    with pytest.raises(AttributeError):
        context.env = "prod"


def test_build_log_group(stack: Stack, context: StackContext):
    context.build_log_group("Function")
    template = Template.from_stack(stack)
    template.has_resource_properties(
        "AWS::Logs::LogGroup",
        {
            "LogGroupName": "/aws/lambda/lambda-example-hello-world-function-dev",
            "RetentionInDays": 365,
        },
    )


def test_context_only_carries_naming_fields(context: StackContext):
    assert not hasattr(context, "aws_region")
    assert not hasattr(context, "aws_account_id")
