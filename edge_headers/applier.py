"""
Security header transform for CloudFront viewer responses.

The CloudFront Functions event carries the response as
``event["response"]["headers"]`` with lowercase names mapped to
``{"value": ...}`` descriptors. Managed names are always overwritten;
everything else on the response is left as it came in.
"""
from collections.abc import Mapping, MutableMapping
from typing import Any

from .exceptions import InvalidInput
from .policy import SECURITY_HEADERS


def writable_headers(response: Any) -> MutableMapping:
    """Return the response's header mapping, or raise InvalidInput."""
    if response is None:
        raise InvalidInput("response is missing")
    if isinstance(response, Mapping):
        if "headers" not in response:
            raise InvalidInput("response has no headers mapping")
        headers = response["headers"]
    else:
        headers = getattr(response, "headers", None)
        if headers is None:
            raise InvalidInput(f"{type(response).__name__} has no headers attribute")
    if not isinstance(headers, MutableMapping):
        raise InvalidInput(f"response headers are not writable: {type(headers).__name__}")
    return headers


def apply_security_headers(response: Any) -> Any:
    headers = writable_headers(response)
    for header in SECURITY_HEADERS:
        headers[header.name] = {"value": header.value}
    return response


def handler(event: Any) -> Any:
    """CloudFront Functions viewer-response entry point."""
    if not isinstance(event, Mapping) or "response" not in event:
        raise InvalidInput("event has no response")
    return apply_security_headers(event["response"])
