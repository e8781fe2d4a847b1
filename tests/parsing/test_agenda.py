from __future__ import annotations

import pytest

from floorwatch.core.types import ParsedAgendaItem
from floorwatch.parsing.agenda import (
    AGENDA_RULES,
    deduplicate_agenda_items,
    detect_agenda_item,
    match_citation,
    match_heading,
    match_motion,
    match_nomination,
    match_tribute,
)


@pytest.mark.parametrize(
    ("text", "expected_type", "bill_number"),
    [
        ("H.R. 1234, the Example Act", "bill", "H.R.1234"),
        ("S. 56", "bill", "S.56"),
        ("S.J.Res. 90, a joint resolution", "resolution", "S.J.Res.90"),
        ("H. Res. 12 providing for consideration", "resolution", "H.Res.12"),
        ("H.Con.Res. 7", "resolution", "H.Con.Res.7"),
        ("NOMINATION OF JANE DOE TO BE A JUDGE", "nomination", None),
        ("I make a motion to proceed", "motion", None),
        ("TRIBUTE TO JOHN SMITH", "tribute", None),
        ("Recognizing the 100th anniversary", "tribute", None),
        ("ENERGY AND WATER DEVELOPMENT APPROPRIATIONS", "other", None),
    ],
)
def test_detect_agenda_item_types(text, expected_type, bill_number):
    match = detect_agenda_item(text)

    assert match is not None
    assert match.type == expected_type
    assert match.bill_number == bill_number


def test_citation_takes_precedence_over_keywords():
    match = detect_agenda_item("MOTION TO PROCEED TO H.R. 5")

    assert match.type == "bill"
    assert match.bill_number == "H.R.5"


def test_nomination_takes_precedence_over_motion():
    assert detect_agenda_item("MOTION TO DISCHARGE A NOMINATION").type == "nomination"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "S. 5",
        "   hi   ",
        "MORNING BUSINESS",
        "CONCLUSION OF MORNING BUSINESS.",
        "SECTION 1 AMENDMENTS TO THE UNDERLYING ACT",
        "I yield the floor.",
    ],
)
def test_fragments_without_agenda_item(text):
    assert detect_agenda_item(text) is None


def test_titles_are_trimmed_and_whitespace_collapsed():
    match = detect_agenda_item("   TRIBUTE   TO\tJOHN SMITH  ")

    assert match.title == "TRIBUTE TO JOHN SMITH"


def test_rules_can_be_used_individually():
    assert match_citation("see S. 56") is not None
    assert match_nomination("executive nomination") is not None
    assert match_motion("Motion to table") is not None
    assert match_tribute("honoring veterans") is not None
    assert match_heading("Energy And Water Development") is None
    assert [name for name, _rule in AGENDA_RULES] == ["citation", "nomination", "motion", "tribute", "heading"]


def test_detect_agenda_item_accepts_custom_rule_table():
    rules = [("heading", match_heading)]

    assert detect_agenda_item("TRIBUTE TO JOHN SMITH", rules=rules).type == "other"


def test_deduplicate_keeps_first_occurrence_case_insensitively():
    items = [
        ParsedAgendaItem(title="TRIBUTE TO JOHN SMITH", type="tribute", start_segment_index=0),
        ParsedAgendaItem(title="H.R. 1", type="bill", bill_number="H.R.1", start_segment_index=2),
        ParsedAgendaItem(title="Tribute to John Smith", type="tribute", start_segment_index=5),
    ]

    unique = deduplicate_agenda_items(items)

    assert [item.start_segment_index for item in unique] == [0, 2]
