"""
Build, test and publish the CloudFront Function that carries the header policy.

CloudFront Functions only run JavaScript, so the function source is rendered
from ``SECURITY_HEADERS`` instead of being kept by hand next to it.
"""
import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from botocore.exceptions import ClientError

from .common.aws_utils import get_cloudfront_client, is_not_found
from .events import load_event
from .exceptions import FunctionTestFailed
from .policy import SECURITY_HEADERS, SecurityHeader

logger = logging.getLogger(__name__)

RUNTIME = "cloudfront-js-2.0"
DEVELOPMENT = "DEVELOPMENT"


def render_function_code(policy: Iterable[SecurityHeader] = SECURITY_HEADERS) -> str:
    lines = [
        "function handler(event) {",
        "    var response = event.response;",
        "    var headers = response.headers;",
        "",
    ]
    for header in policy:
        # JSON string literals are valid JS and survive the quotes in the CSP value
        lines.append(f"    headers['{header.name}'] = {{ value: {json.dumps(header.value)} }};")
    lines += ["", "    return response;", "}", ""]
    return "\n".join(lines)


def _function_config(comment: str) -> Dict[str, str]:
    return {"Comment": comment, "Runtime": RUNTIME}


def _current_etag(client, name: str, stage: str = DEVELOPMENT) -> Optional[str]:
    try:
        resp = client.describe_function(Name=name, Stage=stage)
    except ClientError as e:
        if is_not_found(e, "NoSuchFunctionExists"):
            return None
        raise
    return resp["ETag"]


def upload_function(name: str, code: str, comment: str, client=None) -> str:
    """Create or update the DEVELOPMENT stage; returns the new ETag."""
    client = client or get_cloudfront_client()
    code_bytes = code.encode("utf-8")
    etag = _current_etag(client, name)
    if etag is None:
        logger.info(f"Creating CloudFront function {name}")
        resp = client.create_function(
            Name=name,
            FunctionConfig=_function_config(comment),
            FunctionCode=code_bytes,
        )
    else:
        logger.info(f"Updating CloudFront function {name} (ETag {etag})")
        resp = client.update_function(
            Name=name,
            IfMatch=etag,
            FunctionConfig=_function_config(comment),
            FunctionCode=code_bytes,
        )
    return resp["ETag"]


def publish_function(name: str, code: str, comment: str, client=None, verify: bool = True) -> str:
    """Upload the code, test it when ``verify`` is set, then promote DEVELOPMENT to LIVE.

    Returns the ETag of the published function.
    """
    client = client or get_cloudfront_client()
    etag = upload_function(name, code, comment, client=client)
    if verify:
        run_function_test(name, client=client, etag=etag)

    resp = client.publish_function(Name=name, IfMatch=etag)
    published = resp.get("FunctionSummary", {}).get("Name", name)
    logger.info(f"Published CloudFront function {published}")
    return etag


def _descriptor_value(descriptor: Any) -> Optional[str]:
    # {value: ...} from CloudFront Functions, [{key, value}] from Lambda@Edge
    if isinstance(descriptor, Mapping):
        return descriptor.get("value")
    if isinstance(descriptor, list) and len(descriptor) == 1 and isinstance(descriptor[0], Mapping):
        return descriptor[0].get("value")
    return None


def verify_headers(headers: Mapping) -> List[str]:
    """Names of managed headers that are missing or differ from the policy."""
    mismatched = []
    for header in SECURITY_HEADERS:
        if _descriptor_value(headers.get(header.name)) != header.value:
            mismatched.append(header.name)
    return mismatched


def run_function_test(
    name: str, event: Optional[Dict[str, Any]] = None, client=None, etag: Optional[str] = None
) -> Dict[str, Any]:
    client = client or get_cloudfront_client()
    if event is None:
        event = load_event()
    if etag is None:
        etag = _current_etag(client, name)
        if etag is None:
            raise FunctionTestFailed(f"CloudFront function {name} does not exist")

    resp = client.test_function(
        Name=name,
        IfMatch=etag,
        Stage=DEVELOPMENT,
        EventObject=json.dumps(event).encode("utf-8"),
    )
    result = resp.get("TestResult", {})
    for line in result.get("FunctionExecutionLogs", []):
        logger.debug(f"{name}: {line}")
    error = result.get("FunctionErrorMessage")
    if error:
        raise FunctionTestFailed(f"CloudFront function {name} failed: {error}")

    output = json.loads(result.get("FunctionOutput") or "{}")
    response = output.get("response", output) if isinstance(output, Mapping) else None
    if not isinstance(response, Mapping) or not isinstance(response.get("headers", {}), Mapping):
        raise FunctionTestFailed(f"CloudFront function {name} did not return a response object")
    headers = response.get("headers", {})
    mismatched = verify_headers(headers)
    if mismatched:
        raise FunctionTestFailed(
            f"CloudFront function {name} returned wrong headers: {', '.join(mismatched)}",
            mismatched,
        )
    return {
        "compute_utilization": int(result.get("ComputeUtilization") or 0),
        "headers": headers,
    }
