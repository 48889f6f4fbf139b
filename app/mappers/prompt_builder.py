from app.exceptions.custom import InvalidInputError
from app.schemas.business import ExtractionRequest, UrlExtractionRequest

MAPS_URL_MARKER = "google.com/maps"

_OUTPUT_CONTRACT = (
    "If multiple phone numbers are listed, please return only the first or most prominent one.\n"
    'Return a JSON array where each object contains "name", "address", and "phone".\n'
    'If a detail for a business is unavailable, use the string "N/A".\n'
    "Provide only the raw JSON array in your response, "
    "with no explanation and no markdown fences."
)

_URL_PROMPT_TEMPLATE = (
    "Your task is to extract business information from a Google Maps URL: {url}.\n"
    "First, use Google Search to find all business listings at that URL.\n"
    "Then, for each business found, perform a targeted search to find its official name, "
    "full street address, and primary phone number. "
    "{contract}"
)

_TEXT_PROMPT_TEMPLATE = (
    "Your task is to extract business information from the following text data "
    "which was copied from Google Maps:\n\n---\n{text}\n---\n\n"
    "For each business found in the text, extract its official name, "
    "full street address, and primary phone number. "
    "{contract}"
)


def uses_web_search(request: ExtractionRequest) -> bool:
    return isinstance(request, UrlExtractionRequest)


def build_prompt(request: ExtractionRequest) -> str:
    """Build the model instruction for a URL or pasted-text request.

    Raises InvalidInputError when the payload fails local validation, so
    no model call is ever issued for it.
    """
    if isinstance(request, UrlExtractionRequest):
        url = request.value.strip()
        if not url or MAPS_URL_MARKER not in url:
            raise InvalidInputError("Please provide a valid Google Maps URL.")
        return _URL_PROMPT_TEMPLATE.format(url=url, contract=_OUTPUT_CONTRACT)

    if not request.value.strip():
        raise InvalidInputError("Please paste some text to extract from.")
    # Pasted text is embedded verbatim
    return _TEXT_PROMPT_TEMPLATE.format(text=request.value, contract=_OUTPUT_CONTRACT)
