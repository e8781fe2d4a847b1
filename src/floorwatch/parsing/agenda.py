"""Recognition of agenda item headings in floor transcripts.

Detection runs an ordered table of rules against a text fragment. The first
rule that matches decides the item type, which keeps the precedence
(citation > nomination > motion > tribute > all-caps heading) explicit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
import re

from ..core.types import AgendaItemType, ParsedAgendaItem
from .citations import BILL_PATTERN, is_resolution, normalize_citation

MIN_FRAGMENT_LENGTH = 5
MIN_HEADING_LENGTH = 20

_WHITESPACE = re.compile(r"\s+")
_HEADING_CHARACTERS = re.compile(r"^[A-Z\s\-,]+$")
_TRIBUTE_KEYWORDS = ("TRIBUTE", "HONORING", "RECOGNIZING")


@dataclass(slots=True, frozen=True)
class AgendaMatch:
    """Classification of a fragment before it is tied to a segment index."""

    title: str
    type: AgendaItemType
    bill_number: Optional[str] = None

    def at(self, start_segment_index: int) -> ParsedAgendaItem:
        return ParsedAgendaItem(
            title=self.title,
            type=self.type,
            bill_number=self.bill_number,
            start_segment_index=start_segment_index,
        )


AgendaRule = Callable[[str], Optional[AgendaMatch]]


def _title(fragment: str) -> str:
    return _WHITESPACE.sub(" ", fragment)


def match_citation(fragment: str) -> Optional[AgendaMatch]:
    match = BILL_PATTERN.search(fragment)
    if not match:
        return None
    item_type: AgendaItemType = "resolution" if is_resolution(match.group("suffix")) else "bill"
    return AgendaMatch(
        title=_title(fragment),
        type=item_type,
        bill_number=normalize_citation(match.group(0)),
    )


def _keyword_rule(item_type: AgendaItemType, keywords: Sequence[str]) -> AgendaRule:
    def rule(fragment: str) -> Optional[AgendaMatch]:
        upper = fragment.upper()
        if any(keyword in upper for keyword in keywords):
            return AgendaMatch(title=_title(fragment), type=item_type)
        return None

    rule.__name__ = f"match_{item_type}"
    return rule


match_nomination = _keyword_rule("nomination", ("NOMINATION",))
match_motion = _keyword_rule("motion", ("MOTION TO",))
match_tribute = _keyword_rule("tribute", _TRIBUTE_KEYWORDS)


def match_heading(fragment: str) -> Optional[AgendaMatch]:
    """All-caps headings such as ``ENERGY AND WATER DEVELOPMENT``."""

    if (
        fragment == fragment.upper()
        and len(fragment) > MIN_HEADING_LENGTH
        and _HEADING_CHARACTERS.match(fragment)
    ):
        return AgendaMatch(title=_title(fragment), type="other")
    return None


AGENDA_RULES: Tuple[Tuple[str, AgendaRule], ...] = (
    ("citation", match_citation),
    ("nomination", match_nomination),
    ("motion", match_motion),
    ("tribute", match_tribute),
    ("heading", match_heading),
)


def detect_agenda_item(
    text: str,
    rules: Sequence[Tuple[str, AgendaRule]] = AGENDA_RULES,
) -> Optional[AgendaMatch]:
    """Classify ``text`` as an agenda item, or return ``None``."""

    fragment = text.strip()
    if len(fragment) < MIN_FRAGMENT_LENGTH:
        return None
    for _name, rule in rules:
        match = rule(fragment)
        if match is not None:
            return match
    return None


def deduplicate_agenda_items(items: Iterable[ParsedAgendaItem]) -> List[ParsedAgendaItem]:
    """Keep the first item for each title, compared case-insensitively."""

    seen: set[str] = set()
    unique: List[ParsedAgendaItem] = []
    for item in items:
        key = item.title.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


__all__ = [
    "AGENDA_RULES",
    "AgendaMatch",
    "AgendaRule",
    "deduplicate_agenda_items",
    "detect_agenda_item",
    "match_citation",
    "match_heading",
    "match_motion",
    "match_nomination",
    "match_tribute",
]
