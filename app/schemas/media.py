from typing import Optional

from pydantic import BaseModel, Field, model_validator

from hlvideo.media import MediaVariantSet, PlaybackEnvironment


class MediaSelectRequest(BaseModel):
    slug: Optional[str] = Field(default=None, examples=["showreel"])
    variants: Optional[MediaVariantSet] = None
    environment: PlaybackEnvironment = Field(default_factory=PlaybackEnvironment)

    @model_validator(mode="after")
    def require_slug_or_variants(self):
        if not self.slug and self.variants is None:
            raise ValueError("either slug or variants is required")
        return self

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "slug": "showreel",
                    "environment": {
                        "viewport_width": 390,
                        "supported_types": ["video/mp4; codecs=hev1"],
                        "save_data": False,
                        "effective_connection_type": "4g",
                    },
                }
            ]
        }
    }
