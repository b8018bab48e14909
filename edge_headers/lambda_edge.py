"""
Lambda@Edge flavour of the security header transform.

Lambda@Edge hands the response over as ``Records[0].cf.response`` and keeps
each header as a list of ``{"key": ..., "value": ...}`` entries, where ``key``
is the header name in wire casing.
"""
from collections.abc import Mapping, Sequence
from typing import Any

from .applier import writable_headers
from .exceptions import InvalidInput
from .policy import SECURITY_HEADERS


def apply_lambda_edge_headers(response: Any) -> Any:
    headers = writable_headers(response)
    for header in SECURITY_HEADERS:
        headers[header.name] = [{"key": header.display_name, "value": header.value}]
    return response


def extract_response(event: Any) -> Any:
    if not isinstance(event, Mapping):
        raise InvalidInput("event is not a mapping")
    records = event.get("Records")
    if not isinstance(records, Sequence) or isinstance(records, str) or not records:
        raise InvalidInput("event has no Records")
    record = records[0]
    cf = record.get("cf") if isinstance(record, Mapping) else None
    if not isinstance(cf, Mapping) or "response" not in cf:
        raise InvalidInput("record has no cf.response")
    return cf["response"]


def handler(event, context=None):
    return apply_lambda_edge_headers(extract_response(event))
