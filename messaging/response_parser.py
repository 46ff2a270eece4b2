from __future__ import annotations

import json
import re
from typing import Any, Dict, Union
from urllib.parse import parse_qsl
from xml.etree import ElementTree as ET

from messaging.errors import GatewayError, MalformedResponse, ParseError
from messaging.models import RESULT_STATUS_ERR, RESULT_STATUS_OK, GatewayResult, ResponseFormat

ERROR_CODE_RE = re.compile(r"-?[0-9]+")


def _as_text(raw: Union[bytes, str]) -> str:
    if isinstance(raw, str):
        return raw
    return raw.decode("utf-8", errors="replace")


def _xml_to_dict(elem: ET.Element) -> Dict[str, Any]:
    # Attributes under "@attributes", leaf children as text, repeated tags as lists.
    out: Dict[str, Any] = {}
    if elem.attrib:
        out["@attributes"] = dict(elem.attrib)
    for child in elem:
        value: Any = _xml_to_dict(child) if len(child) else (child.text or "").strip()
        if child.tag in out:
            prev = out[child.tag]
            if isinstance(prev, list):
                prev.append(value)
            else:
                out[child.tag] = [prev, value]
        else:
            out[child.tag] = value
    return out


def decode_body(raw: Union[bytes, str], fmt: ResponseFormat) -> Any:
    if fmt == ResponseFormat.STRING:
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParseError("Wrong return format type. Must be a string", repr(raw[:500])) from e
        if not isinstance(raw, str):
            raise ParseError("Wrong return format type. Must be a string", repr(raw))
        return dict(parse_qsl(raw, keep_blank_values=True))

    if fmt == ResponseFormat.JSON:
        try:
            return json.loads(raw)
        except ValueError as e:
            raise ParseError(f"Invalid JSON response: {e}", _as_text(raw)) from e

    if fmt == ResponseFormat.XML:
        try:
            root = ET.fromstring(raw)
        except ET.ParseError as e:
            raise ParseError(f"Invalid XML response: {e}", _as_text(raw)) from e
        return _xml_to_dict(root)

    raise ParseError(f"Unexpected return format: {fmt!r}", _as_text(raw))


def _error_code(code: Any) -> Any:
    if isinstance(code, str) and ERROR_CODE_RE.fullmatch(code.strip()):
        return int(code.strip())
    return code


def classify(decoded: Any, raw: str) -> GatewayResult:
    if not isinstance(decoded, dict) or "result" not in decoded:
        raise MalformedResponse(f'Bad result format! Raw result: "{raw}"', raw)

    status = str(decoded["result"]).lower()
    if status == RESULT_STATUS_OK:
        return GatewayResult(result=str(decoded["result"]), payload=decoded, raw=raw)
    if status == RESULT_STATUS_ERR:
        raise GatewayError(str(decoded.get("message", "")), _error_code(decoded.get("code")))
    raise MalformedResponse(f'unimplemented result code, raw result: "{raw}"', raw)


def parse_response(raw: Union[bytes, str], fmt: ResponseFormat) -> GatewayResult:
    decoded = decode_body(raw, fmt)
    return classify(decoded, _as_text(raw))
