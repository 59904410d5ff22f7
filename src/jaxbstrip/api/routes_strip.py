# Author: Bradley R. Kinnard — where headers go to die

"""POST /strip. Same core as the cli, in memory, no filesystem involved."""

import base64
import hashlib
import logging

from fastapi import APIRouter, HTTPException, Request

from src.jaxbstrip.adapters.metrics_client import strip_requests_total
from src.jaxbstrip.api.schemas import StripRequest, StripResponse
from src.jaxbstrip.core.errors import TransformFailed
from src.jaxbstrip.core.stripper import strip_bytes
from src.jaxbstrip.utils.validation import validate_strip_request

router = APIRouter(prefix="/strip", tags=["strip"])
log = logging.getLogger(__name__)


@router.post("", response_model=StripResponse)
def strip_payload(request: Request, body: StripRequest) -> StripResponse:
    """strip the xjc header from one uploaded file"""
    request_id = getattr(request.state, "request_id", "unknown")

    raw, encoding = validate_strip_request(body.content_b64, body.encoding)
    log.info(f"strip | enc={encoding} len={len(raw)}")

    try:
        out, changed = strip_bytes(raw, encoding, path="<upload>")
    except TransformFailed as e:
        raise HTTPException(
            status_code=422,  # payload was fine, its bytes weren't
            detail=f"cannot normalize payload: {e.cause}"
        )

    strip_requests_total.labels(changed=str(changed).lower()).inc()
    log.info(f"strip done | changed={changed} out_len={len(out)}")

    return StripResponse(
        changed=changed,
        sha256=hashlib.sha256(out).hexdigest(),
        content_b64=base64.b64encode(out).decode("ascii"),
        request_id=request_id,
    )
