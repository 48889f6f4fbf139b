from pydantic import BaseModel


class Part(BaseModel):
    text: str | None = None


class Content(BaseModel):
    role: str | None = None
    parts: list[Part] = []


class Candidate(BaseModel):
    content: Content | None = None
    finishReason: str | None = None


class GenerateContentResponse(BaseModel):
    candidates: list[Candidate] = []
