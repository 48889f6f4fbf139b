import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import ExtractionError, InvalidInputError

logger = logging.getLogger(__name__)


async def invalid_input_error_handler(_request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.info("Rejected input: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message},
    )


async def extraction_error_handler(_request: Request, exc: ExtractionError) -> JSONResponse:
    logger.error("Extraction error (%s): %s", type(exc).__name__, exc.message)
    return JSONResponse(
        status_code=502,
        content={"detail": exc.message},
    )
