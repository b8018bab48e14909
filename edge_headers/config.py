import os
from typing import Optional

from .common.aws_utils import DEFAULT_REGION


class DeployConfig:
    def __init__(
        self,
        function_name: Optional[str] = None,
        comment: Optional[str] = None,
        distribution_id: Optional[str] = None,
        region: Optional[str] = None,
    ):
        self.function_name = function_name or os.environ.get("CF_FUNCTION_NAME", "security-headers")
        self.comment = comment or os.environ.get("CF_FUNCTION_COMMENT", "Inject security response headers")
        self.distribution_id = distribution_id or os.environ.get("CF_DISTRIBUTION_ID", "")
        self.region = region or os.environ.get("AWS_REGION", DEFAULT_REGION)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()
