from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from hlvideo.brief import BriefRelay
from app.schemas.brief import BriefRequest, BriefResponse, ContactInfoResponse
from app.services.brief_services import get_brief_relay, get_contact_info, process_brief

router = APIRouter(prefix="/api", tags=["brief"])


@router.post(
    "/brief",
    summary="Relay a contact-form brief by email",
    response_model=BriefResponse,
    response_model_exclude_none=True,
    responses={400: {"model": BriefResponse}, 500: {"model": BriefResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": BriefRequest.model_json_schema()}},
        }
    },
)
async def submit_brief(request: Request, relay: BriefRelay = Depends(get_brief_relay)):
    # the raw body is parsed by the relay so malformed JSON is a 500, not a 422
    result = await process_brief(await request.body(), relay)
    return JSONResponse(result.to_body(), status_code=result.status_code)


@router.get("/contact-info", response_model=ContactInfoResponse)
async def contact_info(request: Request):
    """Human contact shown when a brief could not be sent."""
    return get_contact_info(request)
