from typing import Annotated, Literal

from pydantic import BaseModel, Field

NOT_AVAILABLE = "N/A"


class BusinessInfo(BaseModel):
    name: str
    address: str
    phone: str


class UrlExtractionRequest(BaseModel):
    kind: Literal["url"] = "url"
    value: str


class TextExtractionRequest(BaseModel):
    kind: Literal["text"] = "text"
    value: str


ExtractionRequest = Annotated[
    UrlExtractionRequest | TextExtractionRequest,
    Field(discriminator="kind"),
]
