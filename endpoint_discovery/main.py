from aws_lambda_powertools import (
    Logger,
)
from boto3 import (
    client,
)
from infrastructure.build_config import (
    BuildConfig,
    endpoint_export_name,
)
from os import (
    getenv,
)

cloudformation = client("cloudformation")
logger = Logger(
    level=getenv("LOG_LEVEL", "DEBUG"),
    service="endpoint_discovery",
)


class EndpointNotFoundError(LookupError):
    pass


def get_endpoint_url(environment: str, api_name_key: str) -> str:
    export_name = endpoint_export_name(
        BuildConfig(environment=environment), api_name_key)
    paginator = cloudformation.get_paginator("list_exports")

    logger.debug(f"Looking up export {export_name}")

    for page in paginator.paginate():
        for export in page.get("Exports", []):
            if export["Name"] == export_name:
                return export["Value"]

    raise EndpointNotFoundError(f"Export {export_name} not found")
