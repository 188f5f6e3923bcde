from awslambdaric.lambda_context import (
    LambdaContext,
)
from pytest import (
    fixture,
)
from time import (
    time,
)


@fixture
def context() -> LambdaContext:
    context = LambdaContext(
        "00000000-0000-0000-0000-000000000000",
        None,
        None,
        int(time() * 1000) + 30000,
        invoked_function_arn="arn:aws:lambda:us-east-1:111111111111:function:test",
    )

    yield context
