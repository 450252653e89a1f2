import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from portfolio_contact.core.settings import get_settings
from portfolio_contact.lib.dispatch import (
    ConfigurationMissing,
    MalformedRequest,
    configuration_missing_result,
    dispatch_contact,
    server_error_result,
)
from portfolio_contact.lib.payload import ContactPayload, DispatchResult

router = APIRouter(prefix="/api", tags=["contact"])
log = logging.getLogger("uvicorn.error")


def _respond(result: DispatchResult) -> JSONResponse:
    return JSONResponse(result.body(), status_code=result.status_code)


async def _parse_payload(request: Request) -> ContactPayload:
    try:
        data = await request.json()
        return ContactPayload.model_validate(data)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        raise MalformedRequest(str(e)) from e


@router.post("/contact")
async def contact(request: Request):
    try:
        payload = await _parse_payload(request)
        result = await dispatch_contact(payload, get_settings())
    except MalformedRequest as e:
        log.warning(f"[contact] malformed request: {e}")
        result = server_error_result()
    except ConfigurationMissing as e:
        log.error(f"[contact] not configured, missing: {e.missing}")
        result = configuration_missing_result()
    except Exception:
        log.exception("[contact] unexpected failure")
        result = server_error_result()
    return _respond(result)
