import logging
from typing import Annotated

from fastapi import APIRouter, Body

from app.dependencies import ExtractionDep, ResultStoreDep, SessionIdDep
from app.schemas.business import ExtractionRequest
from app.schemas.responses import ExtractionResponse
from app.services.extraction import empty_result_message

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/extract", response_model=ExtractionResponse)
async def extract_businesses(
    request: Annotated[ExtractionRequest, Body()],
    service: ExtractionDep,
    store: ResultStoreDep,
    session_id: SessionIdDep,
) -> ExtractionResponse:
    # Errors propagate to the exception handlers; the store is only touched on success
    businesses = await service.extract(request)

    if not businesses:
        return ExtractionResponse(
            extracted=[],
            added=0,
            total=len(store.get_results(session_id)),
            message=empty_result_message(request),
        )

    total = store.prepend(session_id, businesses)
    logger.info("Session %s: added %d businesses (total %d)", session_id, len(businesses), total)
    return ExtractionResponse(extracted=businesses, added=len(businesses), total=total)
