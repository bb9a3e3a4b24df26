# app/api/survey_routes.py
import json
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.core.client_ip import extract_client_ip
from app.core.hashing import hash_client_ip
from app.db.survey_writer import SurveyWriter, get_writer
from app.schemas.survey import Invalid, validate_submission

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["Survey"])


def _error(message: str) -> JSONResponse:
    # Store failures are answered with 400 as well, matching the published contract
    return JSONResponse({"ok": False, "error": message}, status_code=400)


@router.post("/survey", status_code=201)
async def submit_survey(request: Request, writer: SurveyWriter = Depends(get_writer)):
    """Validate one survey form and append it to survey_response."""
    try:
        try:
            payload = json.loads(await request.body())
        except (ValueError, RecursionError):
            logger.info("rejected survey: body is not valid JSON")
            return _error("invalid_json")

        result = validate_submission(payload)
        if isinstance(result, Invalid):
            logger.info("rejected survey: %s", result.reason)
            return _error(result.reason)

        peer = request.client.host if request.client else None
        ip_hash = hash_client_ip(
            extract_client_ip(request.headers, peer),
            request.app.state.settings.IP_HASH_SALT,
        )
        user_agent = request.headers.get("user-agent")

        # Blocking DB I/O runs off the event loop
        await run_in_threadpool(writer.write, result.submission, user_agent, ip_hash)
    except Exception:
        logger.exception("failed to handle survey submission")
        return _error("invalid_request")

    return JSONResponse({"ok": True}, status_code=201)
