from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def dest_hint(v: str, keep: int = 4) -> str:
    v = (v or "").strip()
    if not v:
        return ""
    if len(v) <= keep:
        return v
    return f"...{v[-keep:]}"


def redact_url(url: str, secret_params: tuple = ("key",)) -> str:
    # Mask credentials in a query string before the URL reaches any log.
    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = [
        (k, "***" if k in secret_params else v)
        for k, v in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(pairs)))
