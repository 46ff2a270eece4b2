from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

API_URL = "https://seeme.hu/gateway"
# Gateway protocol revision, sent as apiVersion on every call.
API_VERSION = "2.0.1"

RESULT_STATUS_OK = "ok"
RESULT_STATUS_ERR = "err"


class ResponseFormat(str, Enum):
    JSON = "json"
    XML = "xml"
    STRING = "string"


class TransportMethod(str, Enum):
    CURL = "curl"
    FILE_GET_CONTENTS = "file_get_contents"


class Operation(str, Enum):
    SEND = "send"
    BALANCE = "balance"
    SETIP = "setip"


@dataclass(frozen=True)
class SmsRequest:
    number: str
    message: str
    sender: Optional[str] = None
    reference: Optional[str] = None
    callback: Optional[str] = None
    callback_url: Optional[str] = None


@dataclass(frozen=True)
class IpUpdateRequest:
    ip: str


class GatewayResult(BaseModel):
    result: str
    payload: Dict[str, Any] = Field(default_factory=dict)
    raw: str = ""

    @property
    def ok(self) -> bool:
        return self.result.lower() == RESULT_STATUS_OK
