from aws_cdk import (
    App,
    Environment,
)
from infrastructure.build_config import (
    get_build_config,
    get_proxy_api_config,
    name,
)
from infrastructure.main import (
    InfrastructureStack,
)

app = App()
build_config = get_build_config(app)
proxy_api_config = get_proxy_api_config(app)

InfrastructureStack(
    app,
    name(build_config, "LambdaProxyAPI"),
    build_config,
    proxy_api_config,
    description="Lambda proxy API with IAM authorization and access logging",
    env=Environment(
        account=build_config.account,
        region=build_config.region,
    ),
)

app.synth()
