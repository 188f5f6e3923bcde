from aws_cdk import (
    App,
)
from dataclasses import (
    dataclass,
)
from os import (
    getenv,
)
from typing import (
    Optional,
)


@dataclass(frozen=True)
class BuildConfig:
    environment: str
    account: Optional[str] = None
    region: Optional[str] = None


@dataclass(frozen=True)
class ProxyApiConfig:
    api_name_key: str
    api_resource_name: str
    method_type: str
    api_caller_role_arn: str
    api_endpoint_reader_account_id: Optional[str] = None


def name(build_config: BuildConfig, resource_name: str) -> str:
    return f"{build_config.environment}-{resource_name}"


def endpoint_export_name(build_config: BuildConfig, api_name_key: str) -> str:
    return name(build_config, f"{api_name_key}-endpointURL")


def get_value(app: App, key: str, variable: str, default=None):
    # Context (cdk.json or -c key=value) wins over the environment
    value = app.node.try_get_context(key)

    if value in (None, ""):
        value = getenv(variable, default)

    return value


def get_required_value(app: App, key: str, variable: str) -> str:
    value = get_value(app, key, variable)

    if not value:
        raise ValueError(
            f"Missing configuration value: context {key} or {variable}")

    return value


def get_build_config(app: App) -> BuildConfig:
    return BuildConfig(
        environment=get_required_value(app, "environment", "ENVIRONMENT"),
        account=get_value(app, "account", "CDK_DEFAULT_ACCOUNT"),
        region=get_value(app, "region", "CDK_DEFAULT_REGION"),
    )


def get_proxy_api_config(app: App) -> ProxyApiConfig:
    return ProxyApiConfig(
        api_name_key=get_required_value(
            app, "apiNameKey", "API_NAME_KEY"),
        api_resource_name=get_required_value(
            app, "apiResourceName", "API_RESOURCE_NAME"),
        method_type=get_value(
            app, "methodType", "METHOD_TYPE", "GET").upper(),
        api_caller_role_arn=get_required_value(
            app, "apiCallerRoleArn", "API_CALLER_ROLE_ARN"),
        api_endpoint_reader_account_id=get_value(
            app, "apiEndPointReaderAccountID", "API_ENDPOINT_READER_ACCOUNT_ID"),
    )
