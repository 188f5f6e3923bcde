from aws_cdk import (
    Duration,
    Stack,
)
from aws_cdk.aws_lambda import (
    Code,
    Function,
    LayerVersion,
    Runtime,
    Tracing,
)
from constructs import (
    Construct,
)
from infrastructure.build_config import (
    BuildConfig,
    ProxyApiConfig,
    name,
)
from infrastructure.lambda_proxy_api import (
    LambdaProxyAPI,
    LambdaProxyAPIProps,
)
from pathlib import (
    Path,
)

POWERTOOLS_LAYER_ACCOUNT = "017000801446"
POWERTOOLS_LAYER_NAME = "AWSLambdaPowertoolsPythonV3-python312-x86_64"
POWERTOOLS_LAYER_VERSION = 7
PROXY_HANDLER_PATH = Path(__file__).resolve().parent.parent / "proxy_handler"


class InfrastructureStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        build_config: BuildConfig,
        proxy_api_config: ProxyApiConfig,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Lambda Powertools public layer, resolved for the stack region
        powertools_layer = LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            f"arn:aws:lambda:{self.region}:{POWERTOOLS_LAYER_ACCOUNT}:layer:"
            f"{POWERTOOLS_LAYER_NAME}:{POWERTOOLS_LAYER_VERSION}",
        )

        self.proxy_function = Function(
            self,
            name(build_config, f"{proxy_api_config.api_name_key}-handler"),
            code=Code.from_asset(str(PROXY_HANDLER_PATH)),
            environment={
                "CORS_ALLOW_ORIGIN": "*",
                "LOG_LEVEL": "INFO",
                "POWERTOOLS_SERVICE_NAME": name(
                    build_config, proxy_api_config.api_name_key),
            },
            handler="main.handler",
            layers=[powertools_layer],
            memory_size=256,
            runtime=Runtime.PYTHON_3_12,
            timeout=Duration.seconds(29),
            tracing=Tracing.ACTIVE,
        )

        self.lambda_proxy_api = LambdaProxyAPI(
            self,
            "LambdaProxyAPI",
            build_config,
            LambdaProxyAPIProps(
                api_caller_role_arn=proxy_api_config.api_caller_role_arn,
                api_endpoint_reader_account_id=(
                    proxy_api_config.api_endpoint_reader_account_id),
                api_name_key=proxy_api_config.api_name_key,
                api_resource_name=proxy_api_config.api_resource_name,
                method_type=proxy_api_config.method_type,
                proxy_function=self.proxy_function,
            ),
        )
