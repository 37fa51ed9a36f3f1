"""Tests for client-side view rendering (count label, empty state, escaping, dates)."""

from datetime import timedelta, timezone

import pytest

from quicknotes.client.render import (
    count_label,
    escape_html,
    format_date,
    render_card,
    render_notes,
)

NOTE = {
    "id": 7,
    "title": "Groceries",
    "content": "Milk",
    "createdAt": "2024-01-15T14:30:00.000Z",
}


def test_empty_cache_shows_empty_state():
    view = render_notes([])
    assert view.empty is True
    assert view.count_label == "0 notes"
    assert view.cards == []
    assert view.html == ""


def test_single_note_uses_singular():
    view = render_notes([NOTE], tz=timezone.utc)
    assert view.empty is False
    assert view.count_label == "1 note"
    assert len(view.cards) == 1


@pytest.mark.parametrize("count,label", [(0, "0 notes"), (1, "1 note"), (2, "2 notes"), (11, "11 notes")])
def test_count_label(count, label):
    assert count_label(count) == label


def test_escape_html():
    assert escape_html("<b>\"Tom\" & 'Jerry'</b>") == (
        "&lt;b&gt;&quot;Tom&quot; &amp; &#039;Jerry&#039;&lt;/b&gt;"
    )


def test_card_escapes_title_and_content():
    card = render_card(
        {**NOTE, "title": "<script>alert(1)</script>", "content": "a & b"},
        tz=timezone.utc,
    )
    assert "<script>" not in card
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in card
    assert "a &amp; b" in card


def test_card_carries_actions_without_inline_handlers():
    card = render_card(NOTE, tz=timezone.utc)
    assert 'data-id="7"' in card
    assert 'data-action="edit"' in card
    assert 'data-action="delete"' in card
    assert "onclick" not in card


def test_card_dates():
    card = render_card(NOTE, tz=timezone.utc)
    assert "Created: Jan 15, 2024, 02:30 PM" in card
    assert "Updated:" not in card

    updated = render_card({**NOTE, "updatedAt": "2024-02-03T09:05:00Z"}, tz=timezone.utc)
    assert "<br>Updated: Feb 3, 2024, 09:05 AM" in updated


def test_format_date_converts_timezone():
    plus_two = timezone(timedelta(hours=2))
    assert format_date("2024-01-15T23:30:00+00:00", tz=plus_two) == "Jan 16, 2024, 01:30 AM"


def test_render_keeps_cache_order():
    notes = [{**NOTE, "id": 3, "title": "newest"}, {**NOTE, "id": 1, "title": "oldest"}]
    view = render_notes(notes, tz=timezone.utc)
    assert "newest" in view.cards[0]
    assert "oldest" in view.cards[1]
