"""
Proxy API construct that wires an API Gateway REST API to a Lambda
handler, sends access logs to CloudWatch Logs and lets a single
externally managed IAM role invoke the one method it exposes
"""
from aws_cdk import (
    Annotations,
    CfnOutput,
)
from aws_cdk.aws_apigateway import (
    AccessLogFormat,
    AuthorizationType,
    IResource,
    LambdaIntegration,
    LambdaRestApi,
    LogGroupLogDestination,
    Method,
    ResponseType,
    StageOptions,
)
from aws_cdk.aws_iam import (
    Effect,
    IRole,
    PolicyStatement,
    Role,
)
from aws_cdk.aws_lambda import (
    IFunction,
)
from aws_cdk.aws_logs import (
    LogGroup,
    RetentionDays,
)
from aws_lambda_powertools import (
    Logger,
)
from constructs import (
    Construct,
)
from dataclasses import (
    dataclass,
)
from infrastructure.build_config import (
    BuildConfig,
    endpoint_export_name,
    name,
)
from os import (
    getenv,
)
from typing import (
    Optional,
)

CORS_RESPONSE_HEADERS = {
    "Access-Control-Allow-Headers": "'Authorization,Content-Type,X-Amz-Date,X-Amz-Security-Token'",
    "Access-Control-Allow-Methods": "'OPTIONS,GET,POST,PUT,PATCH,DELETE'",
    "Access-Control-Allow-Origin": "'*'",
}
logger = Logger(
    level=getenv("LOG_LEVEL", "INFO"),
    service="lambda_proxy_api",
)


@dataclass(frozen=True)
class LambdaProxyAPIProps:
    api_name_key: str
    api_resource_name: str
    proxy_function: IFunction
    api_caller_role_arn: str
    method_type: str
    api_endpoint_reader_account_id: Optional[str] = None


class LambdaProxyAPI(Construct):
    log_group: LogGroup
    api: LambdaRestApi
    role: IRole
    resource: IResource
    method: Method

    def __init__(
        self,
        scope: Construct,
        id: str,
        build_config: BuildConfig,
        props: LambdaProxyAPIProps,
    ) -> None:
        super().__init__(scope, id)

        api_name = name(build_config, props.api_name_key)
        export_name = endpoint_export_name(build_config, props.api_name_key)

        logger.debug(f"Declaring proxy API {api_name}")

        self.log_group = LogGroup(
            self,
            name(build_config, f"{props.api_name_key}-logGroup"),
            retention=RetentionDays.ONE_MONTH,
        )

        # Explicit resource tree, no catch-all {proxy+} routing
        self.api = LambdaRestApi(
            self,
            api_name,
            deploy_options=StageOptions(
                access_log_destination=LogGroupLogDestination(self.log_group),
                access_log_format=AccessLogFormat.json_with_standard_fields(
                    caller=True,
                    http_method=True,
                    ip=True,
                    protocol=True,
                    request_time=True,
                    resource_path=True,
                    response_length=True,
                    status=True,
                    user=True,
                ),
            ),
            handler=props.proxy_function,
            proxy=False,
            rest_api_name=api_name,
        )

        # Errors raised by API Gateway itself (IAM denials, Lambda timeouts)
        # carry the same CORS headers as the Lambda responses
        self.api.add_gateway_response(
            "Default4XXResponse",
            response_headers=CORS_RESPONSE_HEADERS,
            type=ResponseType.DEFAULT_4_XX,
        )
        self.api.add_gateway_response(
            "Default5XXResponse",
            response_headers=CORS_RESPONSE_HEADERS,
            type=ResponseType.DEFAULT_5_XX,
        )

        CfnOutput(
            self,
            export_name,
            export_name=export_name,
            value=self.api.url,
        )

        self.resource = self.api.root.add_resource(props.api_resource_name)

        # Reference only, the role is owned outside of this stack
        self.role = Role.from_role_arn(
            self,
            name(build_config, "importedPermissionSetRole"),
            props.api_caller_role_arn,
        )

        integration = LambdaIntegration(props.proxy_function)

        self.method = self.resource.add_method(
            props.method_type,
            integration,
            authorization_type=AuthorizationType.IAM,
        )

        # The grant must be scoped to the method declared just above
        grant = self.role.add_to_principal_policy(
            PolicyStatement(
                actions=["execute-api:Invoke"],
                effect=Effect.ALLOW,
                resources=[self.method.method_arn],
            )
        )

        if grant.statement_added:
            logger.debug(
                f"Granted execute-api:Invoke on {props.method_type} "
                f"/{props.api_resource_name} to {props.api_caller_role_arn}")
        else:
            Annotations.of(self).add_warning(
                f"execute-api:Invoke was not granted to {props.api_caller_role_arn}, "
                f"the role cannot be modified from this stack's account")
