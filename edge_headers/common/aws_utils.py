from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import ClientError

# CloudFront's control plane lives in us-east-1 regardless of edge location
DEFAULT_REGION = "us-east-1"

_cloudfront_clients: Dict[str, Any] = {}


def get_cloudfront_client(region: Optional[str] = None):
    region = region or DEFAULT_REGION
    if region not in _cloudfront_clients:
        _cloudfront_clients[region] = boto3.client("cloudfront", region_name=region)
    return _cloudfront_clients[region]


def error_code(e: ClientError) -> str:
    return e.response.get("Error", {}).get("Code", "")


def is_not_found(e: ClientError, *codes: str) -> bool:
    if e.response.get("ResponseMetadata", {}).get("HTTPStatusCode") == 404:
        return True
    return error_code(e) in codes
