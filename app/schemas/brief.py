from typing import Optional

from pydantic import BaseModel, Field


class BriefRequest(BaseModel):
    name: str = Field(..., min_length=1, examples=["Анна"])
    phone: str = Field(..., min_length=1, examples=["79990000000"])
    company: Optional[str] = Field(default=None, examples=["Aurora"])
    email: Optional[str] = Field(default=None, examples=["anna@example.com"])
    message: Optional[str] = Field(default=None, examples=["Нужен имиджевый ролик\nк запуску продукта"])


class BriefResponse(BaseModel):
    ok: bool
    error: Optional[str] = None


class ContactInfoResponse(BaseModel):
    email: str
    phone: str
