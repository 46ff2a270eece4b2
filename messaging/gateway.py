from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Union

from config.settings import Settings
from messaging.client_config import ClientConfig
from messaging.errors import SeeMeGatewayError
from messaging.models import API_URL, GatewayResult, Operation, ResponseFormat, TransportMethod
from messaging.request_builder import balance_params, build_url, send_params, setip_params
from messaging.response_parser import parse_response
from messaging.transport import Transport, transport_for
from messaging.validators import parse_ip_request, parse_sms_request
from ops.diagnostics import CallDiagnostics
from ops.metrics import Timer
from utils.redact import dest_hint, redact_url

log = logging.getLogger("seeme.gateway")


class GatewayClient:
    """
    Client for the SeeMe SMS gateway.

    Configuration is validated once, here. Each public call validates its own
    arguments, builds a fresh parameter map, performs a single GET and either
    returns a GatewayResult or raises a SeeMeGatewayError subclass. Nothing is
    retried.
    """

    def __init__(
        self,
        api_key: str,
        log_file_destination: Union[str, bool, None] = False,
        response_format: Union[ResponseFormat, str] = ResponseFormat.JSON,
        method: Union[TransportMethod, str] = TransportMethod.CURL,
        *,
        timeout_s: float = 30.0,
        api_url: str = API_URL,
        transport: Optional[Transport] = None,
    ):
        self._config = ClientConfig(
            api_key=api_key,
            response_format=response_format,
            method=method,
            log_file_destination=log_file_destination,
            timeout_s=timeout_s,
            api_url=api_url,
        )
        self._owns_transport = transport is None
        self.transport = transport or transport_for(self._config.method, self._config.timeout_s)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, transport: Optional[Transport] = None) -> "GatewayClient":
        if settings is None:
            from config.settings import settings
        return cls(
            settings.SEEME_API_KEY,
            log_file_destination=settings.SEEME_LOG_FILE or False,
            response_format=settings.SEEME_FORMAT,
            method=settings.SEEME_METHOD,
            timeout_s=settings.SEEME_TIMEOUT_S,
            api_url=settings.SEEME_API_URL,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "GatewayClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # --- public operations -------------------------------------------------

    def send_sms(
        self,
        number: str,
        message: str,
        sender: Optional[str] = None,
        reference: Optional[str] = None,
        callback: Optional[str] = None,
        callback_url: Optional[str] = None,
    ) -> GatewayResult:
        """
        Send one SMS.

        number is in international format without "+" (e.g. 36201234567).
        callback is "all" or a comma-separated list of delivery status codes.
        """
        diag = self._diagnostics("SEE ME - SEND SMS")
        diag.add("INPUT PARAMS")
        diag.add(f"number: {number!r}")
        diag.add(f"message: {message!r}")
        diag.add(f"sender: {sender!r}")
        diag.add(f"reference: {reference!r}")
        diag.add(f"callback_params: {callback!r}")
        diag.add(f"callback_url: {callback_url!r}")

        def build() -> Dict[str, str]:
            req = parse_sms_request(number, message, sender, reference, callback, callback_url)
            return send_params(self._config.api_key, self._config.response_format, req)

        return self._execute(Operation.SEND, diag, build, dest=number if isinstance(number, str) else "")

    def get_balance(self) -> GatewayResult:
        diag = self._diagnostics("SEE ME - GET BALANCE")

        def build() -> Dict[str, str]:
            return balance_params(self._config.api_key, self._config.response_format)

        return self._execute(Operation.BALANCE, diag, build)

    def set_ip(self, ip: str) -> GatewayResult:
        """Register ip as the only address allowed to call the gateway with this key."""
        diag = self._diagnostics("SEE ME - SET IP")
        diag.add("INPUT PARAMS")
        diag.add(f"ip: {ip!r}")

        def build() -> Dict[str, str]:
            return setip_params(self._config.api_key, self._config.response_format, parse_ip_request(ip))

        return self._execute(Operation.SETIP, diag, build)

    # --- internals ---------------------------------------------------------

    def _diagnostics(self, title: str) -> CallDiagnostics:
        return CallDiagnostics(title, self._config.log_file_destination)

    def _execute(
        self,
        operation: Operation,
        diag: CallDiagnostics,
        build: Callable[[], Dict[str, str]],
        dest: str = "",
    ) -> GatewayResult:
        timer = Timer()
        log.info(
            "seeme_call_attempt",
            extra={"extra": {"event": "seeme_call_attempt", "operation": operation.value, "dest": dest_hint(dest)}},
        )
        try:
            params = build()
            url = build_url(self._config.api_url, params)
            diag.add(f"api_url: {redact_url(url)}")
            raw = self.transport.fetch(url)
            diag.add(f"raw_result: {raw!r}")
            result = parse_response(raw, self._config.response_format)
            diag.add(f"parsed_result: {result.payload!r}")
        except Exception as e:
            diag.add(f"Exception thrown ({type(e).__name__}): {e}")
            kind = e.kind.value if isinstance(e, SeeMeGatewayError) else "unexpected"
            log.warning(
                "seeme_call_failed",
                extra={
                    "extra": {
                        "event": "seeme_call_failed",
                        "operation": operation.value,
                        "dest": dest_hint(dest),
                        "error_type": type(e).__name__,
                        "error_kind": kind,
                        "code": getattr(e, "code", None),
                        "latency_ms": timer.ms(),
                    }
                },
            )
            raise
        finally:
            diag.flush()

        log.info(
            "seeme_call_result",
            extra={
                "extra": {
                    "event": "seeme_call_result",
                    "operation": operation.value,
                    "dest": dest_hint(dest),
                    "result": result.result,
                    "latency_ms": timer.ms(),
                }
            },
        )
        return result
