from .applier import apply_security_headers, handler
from .exceptions import EdgeHeadersError, FunctionTestFailed, InvalidInput
from .policy import SECURITY_HEADERS, SecurityHeader

__all__ = [
    "SECURITY_HEADERS",
    "SecurityHeader",
    "apply_security_headers",
    "handler",
    "EdgeHeadersError",
    "FunctionTestFailed",
    "InvalidInput",
]
