"""Unit tests for the month calendar view."""
import json
import pytest
from datetime import date, datetime

from calendar_grid.calendar_view import build_calendar_view, summarize_event
from calendar_grid.labels import WEEKDAY_HEADERS
from processor.models import EventRecord


@pytest.fixture
def events():
    return [
        EventRecord(
            id=1,
            title="Show A",
            timestamp=datetime(2024, 3, 5, 20, 0),
            venue_name="Teatro Municipal",
            city="  SÃO paulo "
        ),
        EventRecord(id=2, title="Show B", timestamp=datetime(2024, 3, 5, 22, 0), city=""),
        EventRecord(id=3, title="Show C", timestamp=datetime(2024, 4, 1, 9, 5), city="Recife"),
    ]


class TestSummarizeEvent:
    """Test cases for event card fields."""

    def test_card_fields(self, events):
        summary = summarize_event(events[0])

        assert summary.id == 1
        assert summary.title == "Show A"
        assert summary.day == "05"
        assert summary.month == "mar"
        assert summary.time == "20:00"
        assert summary.place == "Teatro Municipal | SÃO paulo"

    def test_place_with_venue_only(self):
        event = EventRecord(
            id=9, title="X", timestamp=datetime(2024, 1, 2, 8, 0), venue_name="Arena"
        )
        assert summarize_event(event).place == "Arena"

    def test_place_without_venue_or_city(self, events):
        assert summarize_event(events[1]).place is None


class TestBuildCalendarView:
    """Test cases for build_calendar_view."""

    def test_march_view(self, events):
        view = build_calendar_view(date(2024, 3, 1), events, datetime(2024, 3, 5, 12, 0))

        assert view.title == "março 2024"
        assert view.weekday_headers == list(WEEKDAY_HEADERS)
        assert view.previous_month == "2024-02"
        assert view.next_month == "2024-04"
        assert [label for label, _ in view.locations] == ["São paulo", "Evento"]
        assert [s.id for _, summaries in view.locations for s in summaries] == [1, 2]
        assert not view.is_empty

        today_cells = [cell for cell in view.cells if cell.is_today]
        assert len(today_cells) == 1
        assert today_cells[0].has_event

    def test_empty_month(self, events):
        view = build_calendar_view(date(2024, 6, 1), events, datetime(2024, 3, 5))

        assert view.is_empty
        assert view.locations == []
        assert not any(cell.has_event for cell in view.cells)

    def test_navigation_across_year_boundary(self):
        view = build_calendar_view(date(2024, 1, 31), [], datetime(2024, 1, 1))

        assert view.previous_month == "2023-12"
        assert view.next_month == "2024-02"

    def test_navigation_stops_at_representable_range(self):
        first = build_calendar_view(date(1, 1, 1), [], datetime(2024, 1, 1))
        last = build_calendar_view(date(9999, 12, 1), [], datetime(2024, 1, 1))

        assert first.previous_month == ""
        assert first.next_month == "0001-02"
        assert last.previous_month == "9999-11"
        assert last.next_month == ""
        assert len([c for c in last.cells if not c.is_blank]) == 31

    def test_to_dict_is_json_serializable(self, events):
        view = build_calendar_view(date(2024, 3, 1), events, datetime(2024, 3, 5))
        data = json.loads(json.dumps(view.to_dict()))

        assert data['title'] == "março 2024"
        assert len(data['cells']) == 42
        assert data['cells'][0] == {
            'date': None,
            'day': None,
            'is_current_month': False,
            'is_today': False,
            'has_event': False
        }
        assert data['cells'][9]['date'] == "2024-03-05"
        assert data['cells'][9]['has_event'] is True
        assert data['locations'][1] == {
            'label': "Evento",
            'events': [{
                'id': 2,
                'title': "Show B",
                'day': "05",
                'month': "mar",
                'time': "22:00",
                'place': None
            }]
        }
        assert data['is_empty'] is False
