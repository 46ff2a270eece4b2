from __future__ import annotations

from typing import Dict
from urllib.parse import urlencode

from messaging.models import API_VERSION, IpUpdateRequest, Operation, ResponseFormat, SmsRequest


class RequestBuilder:
    """Call-scoped query parameter builder. Every request starts with the API key."""

    def __init__(self, api_key: str, response_format: ResponseFormat):
        self._params: Dict[str, str] = {"key": api_key}
        self._format = response_format

    def sms(self, req: SmsRequest) -> "RequestBuilder":
        self._params["number"] = req.number
        self._params["message"] = req.message
        if req.sender is not None:
            self._params["sender"] = req.sender
        if req.reference is not None:
            self._params["reference"] = req.reference
        if req.callback is not None:
            self._params["callback"] = req.callback
        if req.callback_url is not None:
            self._params["callbackurl"] = req.callback_url
        return self

    def method(self, op: Operation) -> "RequestBuilder":
        self._params["method"] = op.value
        return self

    def ip(self, req: IpUpdateRequest) -> "RequestBuilder":
        self._params["ip"] = req.ip
        return self

    def build(self) -> Dict[str, str]:
        params = dict(self._params)
        params["format"] = self._format.value
        params["apiVersion"] = API_VERSION
        return params


def build_url(api_url: str, params: Dict[str, str]) -> str:
    return f"{api_url}?{urlencode(params)}"


def send_params(api_key: str, response_format: ResponseFormat, req: SmsRequest) -> Dict[str, str]:
    return RequestBuilder(api_key, response_format).sms(req).build()


def balance_params(api_key: str, response_format: ResponseFormat) -> Dict[str, str]:
    return RequestBuilder(api_key, response_format).method(Operation.BALANCE).build()


def setip_params(api_key: str, response_format: ResponseFormat, req: IpUpdateRequest) -> Dict[str, str]:
    return RequestBuilder(api_key, response_format).method(Operation.SETIP).ip(req).build()
