from urllib.parse import parse_qsl, urlsplit

from messaging.models import API_VERSION, IpUpdateRequest, ResponseFormat, SmsRequest
from messaging.request_builder import balance_params, build_url, send_params, setip_params


def test_send_params_order_and_content():
    req = SmsRequest(number="36201234567", message="hello", sender="Shop", callback="1,2")
    params = send_params("KEY", ResponseFormat.JSON, req)
    assert list(params) == ["key", "number", "message", "sender", "callback", "format", "apiVersion"]
    assert params["format"] == "json"
    assert params["apiVersion"] == API_VERSION


def test_send_params_omits_absent_optionals():
    params = send_params("KEY", ResponseFormat.XML, SmsRequest(number="1", message="m"))
    assert set(params) == {"key", "number", "message", "format", "apiVersion"}


def test_balance_params():
    params = balance_params("KEY", ResponseFormat.STRING)
    assert params == {"key": "KEY", "method": "balance", "format": "string", "apiVersion": API_VERSION}


def test_setip_params():
    params = setip_params("KEY", ResponseFormat.JSON, IpUpdateRequest(ip="10.0.0.1"))
    assert params["method"] == "setip"
    assert params["ip"] == "10.0.0.1"


def test_build_url_form_encodes():
    url = build_url("https://seeme.hu/gateway", {"key": "K", "message": "hello world & more"})
    assert url == "https://seeme.hu/gateway?key=K&message=hello+world+%26+more"
    assert dict(parse_qsl(urlsplit(url).query))["message"] == "hello world & more"
