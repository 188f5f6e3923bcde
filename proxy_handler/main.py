from aws_lambda_powertools import (
    Logger,
)
from json import (
    dumps,
)
from os import (
    getenv,
)

CORS_ALLOW_ORIGIN = getenv("CORS_ALLOW_ORIGIN", "*")
logger = Logger(
    level=getenv("LOG_LEVEL", "DEBUG"),
    service=getenv("POWERTOOLS_SERVICE_NAME", "proxy_handler"),
)


def cors_headers() -> dict:
    return {
        "Access-Control-Allow-Headers": "Authorization,Content-Type,X-Amz-Date,X-Amz-Security-Token",
        "Access-Control-Allow-Methods": "OPTIONS,GET,POST,PUT,PATCH,DELETE",
        "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
        "Content-Type": "application/json",
    }


def response(status_code: int, body: dict) -> dict:
    return {
        "body": dumps(body),
        "headers": cors_headers(),
        "statusCode": status_code,
    }


def caller_identity(event: dict) -> dict:
    identity = event["requestContext"]["identity"]

    return {
        "caller": identity.get("caller"),
        "userArn": identity.get("userArn"),
    }


def handler(event: dict, context) -> dict:
    """
    The input event is an API Gateway proxy integration request,
    the relevant fields are in the following format:

    {
        "resource": "/items",
        "path": "/items",
        "httpMethod": "GET",
        "requestContext": {
            "identity": {
                "caller": "AROAXXXXXXXXXXXXXXXXX:session",
                "userArn": "arn:aws:sts::111111111111:assumed-role/caller/session"
            }
        }
    }

    Errors are returned as a 500 response carrying the same CORS
    headers, so browsers can read them instead of a bare gateway error
    """
    logger.debug(context)
    logger.debug(event)

    try:
        body = {
            "httpMethod": event["httpMethod"],
            "identity": caller_identity(event),
            "path": event["path"],
            "resource": event["resource"],
        }

        logger.debug(f"Handled {body['httpMethod']} {body['path']}")

        return response(200, body)
    except Exception as exception:
        logger.exception(exception)

        return response(500, {
            "message": "Internal server error",
        })
