from typing import List, Optional


class EdgeHeadersError(Exception):
    """Base class for errors raised by this package."""


class InvalidInput(EdgeHeadersError, ValueError):
    """The host event does not expose a writable response header mapping."""


class FunctionTestFailed(EdgeHeadersError):
    def __init__(self, message: str, mismatched: Optional[List[str]] = None):
        super().__init__(message)
        self.mismatched = mismatched or []
