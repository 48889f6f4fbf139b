import json
import logging
import re
from typing import Any

from app.exceptions.custom import MalformedResponseError, UnexpectedShapeError
from app.schemas.business import NOT_AVAILABLE, BusinessInfo

logger = logging.getLogger(__name__)

# Opening fence with an optional language tag (```json), closing fence at the very end
_FENCE_RE = re.compile(r"\A```(?:[\w+-]+(?=\s))?(.*)```\Z", re.DOTALL)

MALFORMED_MESSAGE = "Failed to parse the AI's response. The format was unexpected."
UNEXPECTED_SHAPE_MESSAGE = (
    "The AI's response was not in the expected format (an array of businesses)."
)


def strip_code_fence(text: str) -> str:
    """Remove a single enclosing markdown code fence, if present."""
    text = text.strip()
    match = _FENCE_RE.match(text)
    if match is None:
        return text
    return match.group(1).strip()


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _field(element: dict[str, Any], key: str) -> str:
    value = element.get(key)
    if not value:
        return NOT_AVAILABLE
    return value if isinstance(value, str) else str(value)


def coerce_business(element: Any) -> BusinessInfo:
    """Map an untrusted JSON value onto BusinessInfo, defaulting falsy fields to N/A."""
    if not isinstance(element, dict):
        element = {}
    return BusinessInfo(
        name=_field(element, "name"),
        address=_field(element, "address"),
        phone=_field(element, "phone"),
    )


def has_usable_phone(business: BusinessInfo) -> bool:
    phone = business.phone.strip()
    return phone != "" and phone != NOT_AVAILABLE


def normalize_response(text: str) -> list[BusinessInfo]:
    """Turn a raw model reply into a filtered list of businesses.

    Accepts a JSON array of objects, or a single object with a truthy
    ``name``. Records without a usable phone number are dropped; an empty
    result is not an error.
    """
    cleaned = strip_code_fence(text)

    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.warning("Model reply is not valid JSON: %.200s", cleaned)
        raise MalformedResponseError(MALFORMED_MESSAGE) from exc

    if isinstance(parsed, list):
        candidates = [coerce_business(item) for item in parsed]
    elif isinstance(parsed, dict) and parsed.get("name"):
        candidates = [coerce_business(parsed)]
    else:
        logger.warning("Model reply has unexpected shape: %.200s", cleaned)
        raise UnexpectedShapeError(UNEXPECTED_SHAPE_MESSAGE)

    businesses = [b for b in candidates if has_usable_phone(b)]
    dropped = len(candidates) - len(businesses)
    if dropped:
        logger.info("Dropped %d of %d businesses without a phone number", dropped, len(candidates))
    return businesses
