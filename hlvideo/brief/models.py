from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ValidationException

REQUIRED_FIELDS_ERROR = "name/phone required"


class BriefPayload(BaseModel):
    """A contact-form brief. Relayed once, never stored."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    company: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None

    @field_validator("name", "phone", "company", "email", "message", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any) -> Optional[str]:
        # falsy non-strings (None, False, 0) count as absent
        if isinstance(v, str):
            return v
        if not v:
            return None
        return str(v)

    @field_validator("company", "email", "message")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


def parse_brief(raw: Any) -> BriefPayload:
    """Validate a decoded request body into a BriefPayload.

    Anything that is not a JSON object is treated as an empty brief.

    Raises:
        ValidationException: when ``name`` or ``phone`` is missing or blank.
    """
    data: Dict[str, Any] = raw if isinstance(raw, dict) else {}
    try:
        return BriefPayload.model_validate(data)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise ValidationException(
            REQUIRED_FIELDS_ERROR,
            error_code="VALIDATION_ERROR",
            details={"fields": fields},
        ) from e
