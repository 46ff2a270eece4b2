from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    INVALID_CONFIG = "invalid_config"
    INVALID_PARAMETER = "invalid_parameter"
    TRANSPORT = "transport"
    PARSE = "parse"
    MALFORMED_RESPONSE = "malformed_response"
    GATEWAY = "gateway"


class SeeMeGatewayError(Exception):
    kind: ErrorKind

    def __init__(self, message: str, code: Any = 0):
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidConfig(SeeMeGatewayError):
    kind = ErrorKind.INVALID_CONFIG


class InvalidParameter(SeeMeGatewayError):
    kind = ErrorKind.INVALID_PARAMETER


class TransportError(SeeMeGatewayError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(SeeMeGatewayError):
    kind = ErrorKind.PARSE

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


class MalformedResponse(SeeMeGatewayError):
    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.raw = raw


class GatewayError(SeeMeGatewayError):
    """The gateway answered with result=err; `code` is the gateway's own error code."""

    kind = ErrorKind.GATEWAY
