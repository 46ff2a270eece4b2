from __future__ import annotations

import hashlib
import re
from typing import Any, Dict, Optional, Union

from messaging.errors import InvalidConfig, InvalidParameter
from messaging.models import IpUpdateRequest, ResponseFormat, SmsRequest, TransportMethod

CHECKSUM_LENGTH = 4
ALL_CALLBACK_CODES = "1,2,3,4,5,6,7,8,9,10"

DIGITS_RE = re.compile(r"[0-9]+")
# Numeric string in the loose sense the gateway accepts for references:
# optional sign, decimal point and exponent, surrounding whitespace allowed.
NUMERIC_RE = re.compile(r"\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?\s*")
CALLBACK_RE = re.compile(r"[0-9]{1,2}(,[0-9]{1,2})*")
_OCTET = r"(25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9]?[0-9])"
IPV4_RE = re.compile(rf"{_OCTET}(\.{_OCTET}){{3}}")


# --- configuration ---------------------------------------------------------

def api_key_checksum_ok(key: str) -> bool:
    """
    The last 4 characters of a key are the first 4 hex digits of the MD5 of
    everything before them. Comparison is case-sensitive.
    """
    body, checksum = key[:-CHECKSUM_LENGTH], key[-CHECKSUM_LENGTH:]
    return hashlib.md5(body.encode("utf-8")).hexdigest()[:CHECKSUM_LENGTH] == checksum


def validate_api_key(key: Any) -> str:
    if not isinstance(key, str):
        raise InvalidConfig("Invalid API key type. Must be string", 1)
    if not api_key_checksum_ok(key):
        raise InvalidConfig("Invalid API key", 18)
    return key.strip()


def validate_format(fmt: Any) -> ResponseFormat:
    try:
        return ResponseFormat(fmt)
    except ValueError:
        valid = ", ".join(f.value for f in ResponseFormat)
        raise InvalidConfig(f"Invalid format. Must be one of [{valid}]", 1) from None


def validate_method(method: Any) -> TransportMethod:
    try:
        return TransportMethod(method)
    except ValueError:
        valid = ", ".join(m.value for m in TransportMethod)
        raise InvalidConfig(f"Invalid method. Must be one of [{valid}]", 1) from None


def validate_log_file_destination(dest: Union[str, bool, None]) -> Optional[str]:
    if dest is None or dest is False or dest == "":
        return None
    if not isinstance(dest, str):
        raise InvalidConfig("Invalid log file destination. Must be string or boolean false", 1)
    return dest


def validate_timeout(timeout_s: Any) -> float:
    if isinstance(timeout_s, bool) or not isinstance(timeout_s, (int, float)) or timeout_s <= 0:
        raise InvalidConfig("Invalid timeout. Must be a positive number of seconds", 1)
    return float(timeout_s)


# --- per-call parameters ---------------------------------------------------

def is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and NUMERIC_RE.fullmatch(value) is not None


def set_number(params: Dict[str, str], number: Any) -> None:
    if not isinstance(number, str):
        raise InvalidParameter("Invalid number parameter type. Must be string", 1)
    number = number.strip()
    if not DIGITS_RE.fullmatch(number):
        raise InvalidParameter("Only numbers are allowed: number", 2)
    params["number"] = number


def set_message(params: Dict[str, str], message: Any) -> None:
    if not isinstance(message, str) or not message.strip():
        raise InvalidParameter("Invalid message parameter type. Must be a not empty string", 1)
    params["message"] = message.strip()


def set_sender(params: Dict[str, str], sender: Any) -> None:
    if sender is None:
        return
    if not isinstance(sender, str):
        raise InvalidParameter("Invalid sender parameter type. Must be string", 1)
    params["sender"] = sender.strip()


def set_reference(params: Dict[str, str], reference: Any) -> None:
    # Only numeric strings are forwarded. Anything else that is a string or a
    # number is dropped without error; older integrations rely on that.
    if reference is None:
        return
    if isinstance(reference, bool) or not isinstance(reference, (str, int, float)):
        raise InvalidParameter("Invalid reference type. Must be string, number or None", 1)
    if is_numeric_string(reference):
        params["reference"] = reference.strip()


def set_callback(params: Dict[str, str], callback: Any) -> None:
    if callback is None:
        return
    if not isinstance(callback, str):
        raise InvalidParameter("Incorrect callback parameter format. Must be string or None", 1)
    if callback == "all":
        params["callback"] = ALL_CALLBACK_CODES
    elif CALLBACK_RE.fullmatch(callback):
        params["callback"] = callback
    else:
        raise InvalidParameter("Incorrect callback parameter format", 1)


def set_callback_url(params: Dict[str, str], callback_url: Any) -> None:
    if callback_url is None:
        return
    if not isinstance(callback_url, str):
        raise InvalidParameter("Incorrect callback URL format. Must be string or None", 1)
    params["callbackurl"] = callback_url


def set_ip(params: Dict[str, str], ip: Any) -> None:
    if not isinstance(ip, str):
        raise InvalidParameter("Incorrect ip parameter format. Must be string", 1)
    if not IPV4_RE.fullmatch(ip):
        raise InvalidParameter("Parameter is invalid: ip", 15)
    params["ip"] = ip


def parse_sms_request(
    number: Any,
    message: Any,
    sender: Any = None,
    reference: Any = None,
    callback: Any = None,
    callback_url: Any = None,
) -> SmsRequest:
    params: Dict[str, str] = {}
    set_number(params, number)
    set_message(params, message)
    set_sender(params, sender)
    set_reference(params, reference)
    set_callback(params, callback)
    set_callback_url(params, callback_url)
    return SmsRequest(
        number=params["number"],
        message=params["message"],
        sender=params.get("sender"),
        reference=params.get("reference"),
        callback=params.get("callback"),
        callback_url=params.get("callbackurl"),
    )


def parse_ip_request(ip: Any) -> IpUpdateRequest:
    params: Dict[str, str] = {}
    set_ip(params, ip)
    return IpUpdateRequest(ip=params["ip"])
