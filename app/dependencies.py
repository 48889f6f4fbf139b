from typing import Annotated

from fastapi import Depends, Header, Request

from app.config import Settings
from app.results import DEFAULT_SESSION, ResultStore
from app.services.extraction import ExtractionService


def get_extraction_service(request: Request) -> ExtractionService:
    return request.app.state.extraction_service


def get_result_store(request: Request) -> ResultStore:
    return request.app.state.result_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_id(x_session_id: Annotated[str | None, Header()] = None) -> str:
    return x_session_id or DEFAULT_SESSION


ExtractionDep = Annotated[ExtractionService, Depends(get_extraction_service)]
ResultStoreDep = Annotated[ResultStore, Depends(get_result_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionIdDep = Annotated[str, Depends(get_session_id)]
