import json
import os
from typing import Any

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

logger = Logger(
    service="lambda-hello-world", level=os.getenv("LOG_LEVEL", "INFO").upper()
)
tracer = Tracer(service="lambda-hello-world")
table_name = os.environ.get("table")


def _response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    return say_hello(event)


def say_hello(event: dict[str, Any]) -> dict[str, Any]:
    try:
        logger.info("Greeting the world", table=table_name)
        return _response(200, {"message": "Hello World!"})
    except Exception as e:
        logger.exception("Unhandled exception in Lambda")
        return _response(500, {"message": str(e)})
