# app/core/client_ip.py
import ipaddress
from typing import Mapping

# Checked in order; the first header holding a valid address wins
_SINGLE_VALUE_HEADERS = (
    "x-client-ip",
    "x-forwarded-for",
    "cf-connecting-ip",
    "fastly-client-ip",
    "true-client-ip",
    "x-real-ip",
    "x-cluster-client-ip",
    "x-forwarded",
    "forwarded-for",
)


def _is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def _clean(value: str) -> str:
    value = value.strip().strip('"')
    # "[::1]:443" / "1.2.3.4:80"
    if value.startswith("["):
        return value[1:].split("]", 1)[0]
    if value.count(":") == 1:
        return value.split(":", 1)[0]
    return value


def _from_list(raw: str) -> str | None:
    for part in raw.split(","):
        candidate = _clean(part)
        if _is_ip(candidate):
            return candidate
    return None


def _from_forwarded(raw: str) -> str | None:
    # RFC 7239: Forwarded: for=192.0.2.60;proto=http, for="[2001:db8::1]"
    for element in raw.split(","):
        for pair in element.split(";"):
            key, _, value = pair.partition("=")
            if key.strip().lower() == "for":
                candidate = _clean(value)
                if _is_ip(candidate):
                    return candidate
    return None


def extract_client_ip(headers: Mapping[str, str], peer: str | None = None) -> str:
    """Best-effort caller address from proxy headers, falling back to the socket peer."""
    lowered = {k.lower(): v for k, v in headers.items()}
    for name in _SINGLE_VALUE_HEADERS:
        raw = lowered.get(name)
        if raw:
            found = _from_list(raw)
            if found:
                return found
    raw = lowered.get("forwarded")
    if raw:
        found = _from_forwarded(raw)
        if found:
            return found
    if peer and _is_ip(peer):
        return peer
    return ""
