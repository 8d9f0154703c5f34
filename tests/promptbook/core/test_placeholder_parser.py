from __future__ import annotations

from src.promptbook.core.placeholders import (
    PlaceholderKind,
    count_placeholders,
    extract_placeholders,
    fill_placeholders,
    has_placeholders,
    validate_placeholders,
)
from src.promptbook.core.placeholders.parser import parse_match


def test_extract_text_placeholder_with_default() -> None:
    placeholders = extract_placeholders("Hi [Name=World]")

    assert len(placeholders) == 1
    placeholder = placeholders[0]
    assert placeholder.key == "Name"
    assert placeholder.kind is PlaceholderKind.TEXT
    assert placeholder.default_value == "World"
    assert placeholder.options == ()


def test_extract_dropdown_keeps_option_order_with_empty_first() -> None:
    (placeholder,) = extract_placeholders("[Color=Red,Green,Blue]")

    assert placeholder.kind is PlaceholderKind.DROPDOWN
    assert placeholder.options == ("", "Red", "Green", "Blue")
    assert placeholder.default_value == ""


def test_extract_dropdown_trims_options() -> None:
    (placeholder,) = extract_placeholders("[Tone = formal ,  casual ]")

    assert placeholder.key == "Tone"
    assert placeholder.options == ("", "formal", "casual")


def test_blank_option_disqualifies_dropdown() -> None:
    (placeholder,) = extract_placeholders("[Color=Red,,Blue]")

    assert placeholder.kind is PlaceholderKind.TEXT
    assert placeholder.default_value == "Red,,Blue"


def test_single_option_is_plain_text() -> None:
    (placeholder,) = extract_placeholders("[Color=Red]")

    assert placeholder.kind is PlaceholderKind.TEXT
    assert placeholder.default_value == "Red"


def test_long_default_is_multiline() -> None:
    (placeholder,) = extract_placeholders("[Bio=" + "x" * 70 + "]")

    assert placeholder.kind is PlaceholderKind.MULTILINE_TEXT
    assert placeholder.default_value == "x" * 70


def test_default_at_threshold_stays_single_line() -> None:
    (placeholder,) = extract_placeholders("[Bio=" + "x" * 60 + "]")

    assert placeholder.kind is PlaceholderKind.TEXT


def test_newline_in_default_is_multiline() -> None:
    (placeholder,) = extract_placeholders("Notes: [Notes=first line\nsecond line]")

    assert placeholder.kind is PlaceholderKind.MULTILINE_TEXT
    assert placeholder.default_value == "first line\nsecond line"


def test_only_first_equals_splits_label() -> None:
    (placeholder,) = extract_placeholders("[Formula=a=b+c]")

    assert placeholder.key == "Formula"
    assert placeholder.default_value == "a=b+c"


def test_first_occurrence_wins_for_duplicate_keys() -> None:
    placeholders = extract_placeholders("[T=KI] and [T=AI]")

    assert [(p.key, p.default_value) for p in placeholders] == [("T", "KI")]


def test_extract_preserves_first_occurrence_order_and_skips_empty_keys() -> None:
    text = "[Topic] for [Audience=devs] [=orphan] [] [  ] then [Topic=ignored] [Length]"

    assert [p.key for p in extract_placeholders(text)] == ["Topic", "Audience", "Length"]


def test_parse_match_without_value() -> None:
    parsed = parse_match("  Name  ")

    assert parsed.key == "Name"
    assert parsed.kind is PlaceholderKind.TEXT
    assert parsed.default_value == ""


def test_fill_uses_default_value_or_user_input() -> None:
    assert fill_placeholders("Hi [Name=World]", {}) == "Hi World"
    assert fill_placeholders("Hi [Name=World]", {"Name": "Ann"}) == "Hi Ann"
    assert fill_placeholders("Hi [Name=World]", {"Name": "  "}) == "Hi World"


def test_fill_replaces_missing_values_with_empty_string() -> None:
    assert fill_placeholders("Dear [Name], thanks", {}) == "Dear , thanks"


def test_fill_dropdown_has_no_textual_default() -> None:
    assert fill_placeholders("Use [Color=Red,Green]", {}) == "Use "
    assert fill_placeholders("Use [Color=Red,Green]", {"Color": "Green"}) == "Use Green"


def test_fill_keeps_per_occurrence_defaults_for_repeated_keys() -> None:
    assert fill_placeholders("[T=KI] and [T=AI]", {}) == "KI and AI"
    assert fill_placeholders("[T=KI] and [T=AI]", {"T": "ML"}) == "ML and ML"


def test_fill_is_idempotent_on_its_output() -> None:
    once = fill_placeholders("Write about [Topic=AI] for [Audience]", {"Audience": "kids"})

    assert once == "Write about AI for kids"
    assert fill_placeholders(once, {"Audience": "adults"}) == once


def test_fill_leaves_literal_text_untouched() -> None:
    text = "Stray ] bracket, [Key=v] and an open [ one"

    assert fill_placeholders(text, {}) == "Stray ] bracket, v and an open [ one"


def test_match_never_spans_an_embedded_close_bracket() -> None:
    assert fill_placeholders("[a]b]", {"a": "X"}) == "Xb]"
    assert count_placeholders("[]x]") == 1


def test_empty_key_match_uses_inline_default() -> None:
    assert fill_placeholders("a [] b [=x] c", {}) == "a  b x c"


def test_none_inputs_are_treated_as_empty() -> None:
    assert extract_placeholders(None) == []
    assert fill_placeholders(None, None) == ""
    assert validate_placeholders(None) == []


def test_validate_reports_bracket_imbalance_first() -> None:
    warnings = validate_placeholders("[A] [B=1] ]")

    assert warnings == ["Unbalanced brackets: 2 × '[' vs. 3 × ']'"]


def test_validate_reports_empty_placeholder_once() -> None:
    assert validate_placeholders("[]") == ["Empty placeholder found: []"]


def test_validate_reports_missing_label_with_full_match() -> None:
    assert validate_placeholders("Say [=hello]") == ["Placeholder without label: [=hello]"]


def test_validate_orders_warnings_by_scan_position() -> None:
    warnings = validate_placeholders("[=a] [ ] [ok] [=b] [")

    assert warnings == [
        "Unbalanced brackets: 5 × '[' vs. 4 × ']'",
        "Placeholder without label: [=a]",
        "Empty placeholder found: []",
        "Placeholder without label: [=b]",
    ]


def test_validate_accepts_well_formed_template() -> None:
    assert validate_placeholders("Write [Topic=AI] for [Audience=devs,managers]") == []


def test_has_placeholders() -> None:
    assert has_placeholders("no brackets here") is False
    assert has_placeholders("] backwards [") is False
    assert has_placeholders("[x]") is True
    assert has_placeholders("[]") is True


def test_count_includes_duplicates_and_empty_keys() -> None:
    assert count_placeholders("[x] [x] [] [=y]") == 4
    assert count_placeholders("plain text") == 0
