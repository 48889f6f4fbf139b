import logging

from app.exceptions.custom import (
    ExtractionFailedError,
    MalformedResponseError,
    UnexpectedShapeError,
)
from app.mappers.prompt_builder import build_prompt, uses_web_search
from app.mappers.response_normalizer import normalize_response
from app.schemas.business import BusinessInfo, ExtractionRequest
from app.services.gemini import GeminiService

logger = logging.getLogger(__name__)

_FAILED_MESSAGES = {
    "url": (
        "Failed to extract information. The URL might be invalid, "
        "not publicly accessible, or the service is temporarily unavailable."
    ),
    "text": "Failed to extract information from the provided text.",
}

_EMPTY_MESSAGES = {
    "url": "No business details could be extracted from this URL. Please try another.",
    "text": "No business details could be extracted from the pasted text.",
}


def empty_result_message(request: ExtractionRequest) -> str:
    return _EMPTY_MESSAGES[request.kind]


class ExtractionService:
    def __init__(self, gemini: GeminiService):
        self._gemini = gemini

    async def extract(self, request: ExtractionRequest) -> list[BusinessInfo]:
        """Prompt the model for one request and normalize its reply.

        InvalidInputError, MalformedResponseError and UnexpectedShapeError
        propagate unchanged; anything else becomes ExtractionFailedError.
        """
        prompt = build_prompt(request)

        try:
            reply = await self._gemini.generate(
                prompt, web_search=uses_web_search(request)
            )
            businesses = normalize_response(reply)
        except (MalformedResponseError, UnexpectedShapeError):
            raise
        except Exception as exc:
            logger.exception("Extraction from %s failed", request.kind)
            raise ExtractionFailedError(_FAILED_MESSAGES[request.kind]) from exc

        logger.info("Extracted %d businesses from %s", len(businesses), request.kind)
        return businesses
