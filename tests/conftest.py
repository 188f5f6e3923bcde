from os import (
    environ,
)

# Module level boto3 clients need a region at import time
environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
environ.setdefault("LOG_LEVEL", "DEBUG")
