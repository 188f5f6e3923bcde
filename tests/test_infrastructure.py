from aws_cdk import (
    App,
)
from aws_cdk.assertions import (
    Match,
    Template,
)
from infrastructure.build_config import (
    BuildConfig,
    ProxyApiConfig,
)
from infrastructure.main import (
    InfrastructureStack,
)
from pytest import (
    fixture,
)


@fixture
def stack() -> InfrastructureStack:
    stack = InfrastructureStack(
        App(),
        "test-LambdaProxyAPI",
        BuildConfig(environment="test"),
        ProxyApiConfig(
            api_caller_role_arn="arn:aws:iam::111111111111:role/caller",
            api_name_key="proxy",
            api_resource_name="items",
            method_type="GET",
        ),
    )

    yield stack


def test_proxy_function(stack: InfrastructureStack) -> None:
    template = Template.from_stack(stack)

    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Environment": {
                "Variables": {
                    "CORS_ALLOW_ORIGIN": "*",
                    "POWERTOOLS_SERVICE_NAME": "test-proxy",
                },
            },
            "Handler": "main.handler",
            "Layers": Match.any_value(),
            "Runtime": "python3.12",
        },
    )


def test_proxy_api(stack: InfrastructureStack) -> None:
    template = Template.from_stack(stack)

    template.has_resource_properties(
        "AWS::ApiGateway::RestApi",
        {
            "Name": "test-proxy",
        },
    )
    template.has_resource_properties(
        "AWS::ApiGateway::Method",
        {
            "AuthorizationType": "AWS_IAM",
            "HttpMethod": "GET",
        },
    )
    template.has_output(
        "*",
        {
            "Export": {
                "Name": "test-proxy-endpointURL",
            },
        },
    )


def test_proxy_api_uses_proxy_function(stack: InfrastructureStack) -> None:
    assert stack.lambda_proxy_api.method.http_method == "GET"
    assert stack.lambda_proxy_api.api.node.id == "test-proxy"
