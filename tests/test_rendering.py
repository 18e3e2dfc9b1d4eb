"""Tests for assistant reply parsing."""

from __future__ import annotations

from weather_planner.assistant.rendering import InlineSpan, parse_inline, parse_message


def test_bold_markers_become_bold_spans() -> None:
    assert parse_inline("Wear **sunscreen** today") == (
        InlineSpan("Wear "),
        InlineSpan("sunscreen", bold=True),
        InlineSpan(" today"),
    )


def test_unmatched_marker_stays_literal() -> None:
    assert parse_inline("a **dangling marker") == (InlineSpan("a **dangling marker"),)


def test_numbered_and_bulleted_items() -> None:
    text = "**Summary:** warm day\n\n1. Light clothes\n2. **Surf** early\n- Hydrate\n* Hat"

    blocks = parse_message(text)

    assert [block.kind for block in blocks] == [
        "paragraph",
        "list_item",
        "list_item",
        "list_item",
        "list_item",
    ]
    assert [block.marker for block in blocks] == [None, "1.", "2.", "•", "•"]
    assert blocks[0].spans[0] == InlineSpan("Summary:", bold=True)
    assert blocks[2].plain_text == "Surf early"
    assert blocks[4].plain_text == "Hat"


def test_blank_lines_are_dropped() -> None:
    assert parse_message("\n   \n") == []
    assert [b.plain_text for b in parse_message("One\n\n\nTwo")] == ["One", "Two"]


def test_refusal_phrase_is_a_single_paragraph() -> None:
    blocks = parse_message("Sorry, I am just a weather Assistant powered by Google")

    assert len(blocks) == 1
    assert blocks[0].kind == "paragraph"
    assert blocks[0].plain_text == "Sorry, I am just a weather Assistant powered by Google"
