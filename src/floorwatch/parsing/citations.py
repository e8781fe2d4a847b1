"""Bill and resolution citations found in Congressional Record text."""
from __future__ import annotations

from typing import List, Optional
import re

from ..core.types import BillReference

CURRENT_CONGRESS = 119

# Longer chamber prefixes come first so "S.J.Res. 90" is not read as "S." + garbage.
BILL_PATTERN = re.compile(
    r"(?<![A-Za-z.])"
    r"(?P<prefix>S\.Con\.|H\.Con\.|S\.J\.|H\.J\.|S\.|H\.)"
    r"\s*(?P<suffix>Res\.|R\.)?"
    r"\s*(?P<number>\d+)",
    re.IGNORECASE,
)
_WHITESPACE = re.compile(r"\s+")
_NORMALIZED_CITATION = re.compile(r"^(?P<chamber>scon|hcon|sj|hj|s|h)(?P<suffix>res|r)?(?P<number>\d+)$")

_URL_TYPES = {
    "s": "senate-bill",
    "sr": "senate-bill",
    "h": "house-bill",
    "hr": "house-bill",
    "sres": "senate-resolution",
    "hres": "house-resolution",
    "sjres": "senate-joint-resolution",
    "hjres": "house-joint-resolution",
    "sconres": "senate-concurrent-resolution",
    "hconres": "house-concurrent-resolution",
}


def normalize_citation(citation: str) -> str:
    """Remove all whitespace from ``citation`` (``"H.R. 1234"`` -> ``"H.R.1234"``)."""

    return _WHITESPACE.sub("", citation)


def is_resolution(suffix: Optional[str]) -> bool:
    return bool(suffix) and "res" in suffix.lower()


def extract_bill_numbers(text: str) -> List[str]:
    """Return every citation in ``text`` once, in order of first appearance."""

    bills: List[str] = []
    for match in BILL_PATTERN.finditer(text):
        bill = normalize_citation(match.group(0))
        if bill not in bills:
            bills.append(bill)
    return bills


def parse_bill_number(citation: str, congress: int = CURRENT_CONGRESS) -> Optional[BillReference]:
    """Split a citation such as ``S.J.Res. 90`` into congress, type and number."""

    normalized = re.sub(r"[\s.]", "", citation).lower()
    match = _NORMALIZED_CITATION.match(normalized)
    if not match:
        return None
    bill_type = match.group("chamber")
    suffix = match.group("suffix")
    if suffix:
        bill_type += "res" if suffix == "res" else "r"
    return BillReference(congress=congress, bill_type=bill_type, number=int(match.group("number")))


def _ordinal(value: int) -> str:
    if 10 <= value % 100 <= 20:
        return f"{value}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")
    return f"{value}{suffix}"


def bill_url(citation: str, congress: int = CURRENT_CONGRESS) -> Optional[str]:
    """Congress.gov URL for ``citation`` or ``None`` if it cannot be resolved."""

    reference = parse_bill_number(citation, congress)
    if reference is None:
        return None
    url_type = _URL_TYPES.get(reference.bill_type)
    if url_type is None:
        return None
    return f"https://www.congress.gov/bill/{_ordinal(reference.congress)}-congress/{url_type}/{reference.number}"


__all__ = [
    "BILL_PATTERN",
    "CURRENT_CONGRESS",
    "bill_url",
    "extract_bill_numbers",
    "is_resolution",
    "normalize_citation",
    "parse_bill_number",
]
