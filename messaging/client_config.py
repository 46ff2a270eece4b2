from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from messaging.models import API_URL, ResponseFormat, TransportMethod
from messaging import validators


@dataclass(frozen=True)
class ClientConfig:
    """
    Validated, immutable gateway configuration.

    Every field is checked in __post_init__; an invalid value raises
    InvalidConfig so a ClientConfig instance is always usable.
    """

    api_key: str
    response_format: Union[ResponseFormat, str] = ResponseFormat.JSON
    method: Union[TransportMethod, str] = TransportMethod.CURL
    log_file_destination: Union[str, bool, None] = None
    timeout_s: float = 30.0
    api_url: str = API_URL

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_key", validators.validate_api_key(self.api_key))
        object.__setattr__(self, "response_format", validators.validate_format(self.response_format))
        object.__setattr__(self, "method", validators.validate_method(self.method))
        object.__setattr__(
            self, "log_file_destination", validators.validate_log_file_destination(self.log_file_destination)
        )
        object.__setattr__(self, "timeout_s", validators.validate_timeout(self.timeout_s))

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', response_format={self.response_format.value!r}, "
            f"method={self.method.value!r}, log_file_destination={self.log_file_destination!r}, "
            f"timeout_s={self.timeout_s!r}, api_url={self.api_url!r})"
        )
