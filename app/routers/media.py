from fastapi import APIRouter, Request

from app.schemas.media import MediaSelectRequest
from app.services.media_services import list_placements, select_media

router = APIRouter(prefix="/api/media", tags=["media"])


@router.get("/placements")
async def placements():
    return {"placements": list_placements()}


@router.post(
    "/select",
    summary="Resolve the video element and source for a client environment",
)
async def select(request: Request, body: MediaSelectRequest):
    return select_media(request, body)
