import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import (
    ExtractionFailedError,
    InvalidInputError,
    MalformedResponseError,
    UnexpectedShapeError,
)
from app.exceptions.handlers import (
    extraction_error_handler,
    invalid_input_error_handler,
)
from app.results import ResultStore
from app.routers.extraction import router as extraction_router
from app.routers.results import router as results_router
from app.services.extraction import ExtractionService
from app.services.gemini import GeminiService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        gemini = GeminiService(client, settings.gemini_api_key, settings.gemini_model)

        app.state.settings = settings
        app.state.extraction_service = ExtractionService(gemini)
        app.state.result_store = ResultStore(max_sessions=settings.max_sessions)

        yield


app = FastAPI(title="Maps Lead Extractor", lifespan=lifespan)

app.add_exception_handler(InvalidInputError, invalid_input_error_handler)
app.add_exception_handler(MalformedResponseError, extraction_error_handler)
app.add_exception_handler(UnexpectedShapeError, extraction_error_handler)
app.add_exception_handler(ExtractionFailedError, extraction_error_handler)

app.include_router(extraction_router)
app.include_router(results_router)
