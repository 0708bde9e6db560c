import pytest

from medilingo.normalize import expand_abbreviations, normalize_instruction
from medilingo.vocab import ABBREVIATIONS


def test_trims_lowercases_and_appends_sentinel():
    assert normalize_instruction("  Take 1 Tablet DAILY ") == "take 1 tablet daily ."


def test_keeps_existing_period():
    assert normalize_instruction("take 1 tablet daily.") == "take 1 tablet daily."


def test_collapses_whitespace():
    assert normalize_instruction("take   1\ttablet \n daily") == "take 1 tablet daily ."


def test_expands_bid():
    assert "twice a day" in normalize_instruction("take 1 tablet bid.")


@pytest.mark.parametrize("abbr", sorted(ABBREVIATIONS))
def test_every_abbreviation_is_expanded(abbr):
    out = normalize_instruction(f"take 1 tablet {abbr}")
    assert ABBREVIATIONS[abbr] in out
    assert f" {abbr} " not in f" {out} "


def test_abbreviation_inside_word_is_left_alone():
    assert expand_abbreviations("morbid stationary pcs") == "morbid stationary pcs"


def test_dotted_abbreviation_at_end_of_text():
    assert normalize_instruction("take 1 tablet q.d.") == "take 1 tablet every day ."


def test_npo_is_not_read_as_po():
    assert normalize_instruction("npo") == "nothing by mouth ."


@pytest.mark.parametrize("raw", [
    "take 1 tablet every 8 hours.",
    "  TAKE 2 capsules  BID ",
    "apply patch qam",
    "take 1 widget.",
    "take q.d",
    "",
])
def test_normalization_is_idempotent(raw):
    once = normalize_instruction(raw)
    assert normalize_instruction(once) == once
