import pytest

from app.exceptions.custom import InvalidInputError
from app.mappers.prompt_builder import build_prompt, uses_web_search
from app.schemas.business import TextExtractionRequest, UrlExtractionRequest

MAPS_URL = "https://www.google.com/maps/search/dentists+in+austin/@30.26,-97.74,13z"


def test_url_prompt_embeds_url_and_contract():
    prompt = build_prompt(UrlExtractionRequest(value=MAPS_URL))

    assert MAPS_URL in prompt
    assert "Google Search" in prompt
    assert '"name", "address", and "phone"' in prompt
    assert '"N/A"' in prompt
    assert "first or most prominent" in prompt
    assert "raw JSON array" in prompt


def test_url_prompt_trims_whitespace():
    prompt = build_prompt(UrlExtractionRequest(value=f"  {MAPS_URL}\n"))
    assert f"URL: {MAPS_URL}." in prompt


def test_url_without_maps_marker_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        build_prompt(UrlExtractionRequest(value="https://example.com"))
    assert exc_info.value.message == "Please provide a valid Google Maps URL."


def test_blank_url_rejected():
    with pytest.raises(InvalidInputError):
        build_prompt(UrlExtractionRequest(value="   "))


def test_text_prompt_embeds_text_verbatim():
    pasted = "Joe's Pizza\n4.5 (120) · Pizza\n123 Main St\n(555) 123-4567\n{not a template}"
    prompt = build_prompt(TextExtractionRequest(value=pasted))

    assert f"---\n{pasted}\n---" in prompt
    assert "Google Search" not in prompt
    assert '"name", "address", and "phone"' in prompt


def test_blank_text_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        build_prompt(TextExtractionRequest(value=" \n\t "))
    assert exc_info.value.message == "Please paste some text to extract from."


def test_web_search_only_for_urls():
    assert uses_web_search(UrlExtractionRequest(value=MAPS_URL)) is True
    assert uses_web_search(TextExtractionRequest(value="Joe's Pizza")) is False
