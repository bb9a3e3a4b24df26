# app/core/hashing.py
import hashlib


def hash_client_ip(ip: str | None, salt: str | None) -> str | None:
    """
    Salted SHA-256 of the caller's address, hex encoded.
    Returns None when either the address or the salt is missing, so a raw
    address is never stored and hashing can be switched off by leaving the
    salt empty.
    """
    if not ip or not salt:
        return None
    return hashlib.sha256((ip + salt).encode("utf-8")).hexdigest()
