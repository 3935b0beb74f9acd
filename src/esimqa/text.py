"""
Text cleanup applied to every field read from the storefront.

The package panel renders values across nested spans, so raw text content
carries newlines and runs of spaces. Each reader funnels its raw text
through one of these helpers before it is compared.
"""

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")
_QUANTITY = re.compile(r"^\s*(\d+(?:[.,]\d+)?)\s*([^\W\d]+)\s*$")


def normalize_whitespace(text: Optional[str]) -> str:
    """Collapse whitespace runs to single spaces and trim.

    A missing text content (None) becomes the empty string so that it
    compares as an ordinary mismatch.
    """
    if text is None:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


def format_quantity(text: Optional[str]) -> str:
    """Render a number-with-unit value as ``"<number> <unit>"``.

    ``"1GB"``, ``" 1 \\n GB "`` and ``"1 GB"`` all become ``"1 GB"``. Text
    that is not a single number followed by a single unit is only
    whitespace-normalized.
    """
    match = _QUANTITY.match(text or "")
    if match is None:
        return normalize_whitespace(text)
    return f"{match.group(1)} {match.group(2)}"


def strip_currency_code(text: Optional[str], code: str = "USD") -> str:
    """Drop the trailing ISO currency code from a displayed price.

    ``"$4.50 USD"`` becomes ``"$4.50"``.
    """
    cleaned = normalize_whitespace(text)
    if cleaned.endswith(code):
        cleaned = cleaned[: -len(code)]
    return cleaned.strip()
