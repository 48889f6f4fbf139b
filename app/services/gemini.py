import logging

import httpx

from app.exceptions.custom import GeminiError, RateLimitError
from app.schemas.gemini import GenerateContentResponse

logger = logging.getLogger(__name__)

API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-2.5-flash"


def build_generate_url(model: str) -> str:
    return f"{API_BASE}/{model}:generateContent"


class GeminiService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        model: str = DEFAULT_MODEL,
    ):
        self._client = client
        self._api_key = api_key
        self._model = model

    async def generate(self, prompt: str, web_search: bool = False) -> str:
        """Send one prompt to Gemini and return the raw reply text."""
        payload: dict = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }
        if web_search:
            payload["tools"] = [{"google_search": {}}]

        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self._api_key,
        }

        try:
            resp = await self._client.post(
                build_generate_url(self._model), json=payload, headers=headers
            )
        except httpx.HTTPError as exc:
            logger.exception("Gemini request failed")
            raise GeminiError(f"Gemini request failed: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Gemini")
        if resp.status_code >= 400:
            raise GeminiError(resp.text, status_code=resp.status_code)

        return self._extract_text(GenerateContentResponse(**resp.json()))

    @staticmethod
    def _extract_text(data: GenerateContentResponse) -> str:
        if not data.candidates or data.candidates[0].content is None:
            raise GeminiError("Gemini returned no candidates")

        # Grounded replies can be split across several text parts
        text = "".join(
            part.text for part in data.candidates[0].content.parts if part.text
        )
        if not text:
            raise GeminiError("Gemini returned an empty reply")

        logger.debug("Gemini reply (%d chars, finish=%s)", len(text), data.candidates[0].finishReason)
        return text
