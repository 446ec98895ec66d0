from typing import List

from fastapi import HTTPException, Request

from hlvideo.media import PLACEMENTS, get_placement, render_video_attributes
from app.schemas.media import MediaSelectRequest


def list_placements() -> List[dict]:
    return [placement.model_dump() for placement in PLACEMENTS.values()]


def select_media(request: Request, body: MediaSelectRequest) -> dict:
    variants = body.variants
    if variants is None:
        placement = get_placement(body.slug)
        if placement is None:
            raise HTTPException(404, f"Unknown media placement: {body.slug}")
        variants = placement.variants
    return render_video_attributes(variants, body.environment, request.app.state.config.media)
