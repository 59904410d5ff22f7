# Author: Bradley R. Kinnard — the wire format

"""Request/response models for the HTTP surface. Bytes travel as base64 so nothing mangles line endings."""

from typing import Literal

from pydantic import BaseModel, Field


class StripRequest(BaseModel):
    content_b64: str
    encoding: str = Field(default="utf-8")


class StripResponse(BaseModel):
    changed: bool
    sha256: str  # of the output, handy for reproducibility checks
    content_b64: str
    request_id: str


class HealthResponse(BaseModel):
    status: Literal["ok"]
    request_id: str
    version: str
    max_payload_bytes: int
