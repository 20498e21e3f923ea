import json
import os
from typing import Any, Optional

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

logger = Logger(
    service="lambda-hello-name", level=os.getenv("LOG_LEVEL", "INFO").upper()
)
tracer = Tracer(service="lambda-hello-name")
table_name = os.environ.get("table")


def _response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


@tracer.capture_method
def extract_name(event: dict[str, Any]) -> Optional[str]:
    params = event.get("queryStringParameters") or {}
    name = (params.get("name") or "").strip()
    return name or None


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    return greet(event)


def greet(event: dict[str, Any]) -> dict[str, Any]:
    try:
        name = extract_name(event)
        if not name:
            logger.warning("Request without a name query parameter")
            return _response(400, {"message": "Missing 'name' query parameter"})

        logger.info("Greeting caller", table=table_name)
        return _response(200, {"message": f"Hello {name}!"})

    except Exception as e:
        logger.exception("Unhandled exception in Lambda")
        return _response(500, {"message": str(e)})
