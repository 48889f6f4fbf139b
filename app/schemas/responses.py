from pydantic import BaseModel

from app.schemas.business import BusinessInfo


class ExtractionResponse(BaseModel):
    extracted: list[BusinessInfo]
    added: int
    total: int
    message: str | None = None


class ResultsResponse(BaseModel):
    total: int
    results: list[BusinessInfo]


class ClearResponse(BaseModel):
    cleared: int
