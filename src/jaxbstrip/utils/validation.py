# Author: Bradley R. Kinnard — garbage in, 4xx out

"""Input validation for the HTTP surface. Reject bad requests before decoding anything."""

import base64
import binascii
import codecs

from fastapi import HTTPException, status

from src.jaxbstrip.config import get_settings


def decode_payload(content_b64: str) -> bytes:
    """base64 -> bytes, 400 if it isn't base64"""
    try:
        return base64.b64decode(content_b64, validate=True)
    except (binascii.Error, ValueError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="content_b64 is not valid base64"
        )


def validate_payload_size(raw: bytes) -> None:
    """No ObjectFactory is this big."""
    limit = get_settings().max_payload_bytes
    if len(raw) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"payload too large: {len(raw)} bytes, max {limit}"
        )


def validate_encoding(encoding: str) -> str:
    """normalized codec name, or 400"""
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"unknown encoding: {encoding}"
        )


def validate_strip_request(content_b64: str, encoding: str) -> tuple[bytes, str]:
    """Run all validations. Call this from the route before doing real work."""
    enc = validate_encoding(encoding)
    raw = decode_payload(content_b64)
    validate_payload_size(raw)
    return raw, enc
