"""Composition of grid and location groups into a renderable month view."""
import logging
from typing import List, Optional

from calendar_grid.event_aggregator import EventAggregator
from calendar_grid.grid_builder import GridBuilder
from calendar_grid.labels import (
    MONTH_ABBREVIATIONS,
    WEEKDAY_HEADERS,
    DateLike,
    month_label,
    navigation_key,
)
from processor.models import CalendarView, EventRecord, EventSummary

logger = logging.getLogger(__name__)


def summarize_event(event: EventRecord) -> EventSummary:
    """Build the card fields shown for an event in the month list."""
    timestamp = event.timestamp
    return EventSummary(
        id=event.id,
        title=event.title,
        day=f"{timestamp.day:02d}",
        month=MONTH_ABBREVIATIONS[timestamp.month - 1],
        time=timestamp.strftime('%H:%M'),
        place=_place_line(event.venue_name, event.city)
    )


def _place_line(venue_name: Optional[str], city: Optional[str]) -> Optional[str]:
    parts = [part.strip() for part in (venue_name, city) if part and part.strip()]
    if not parts:
        return None
    return " | ".join(parts)


def build_calendar_view(
    reference_month: DateLike,
    events: List[EventRecord],
    today: DateLike,
    grid_builder: Optional[GridBuilder] = None,
    aggregator: Optional[EventAggregator] = None
) -> CalendarView:
    """
    Build the full view model for one month.

    Args:
        reference_month: Any date within the month to display
        events: All known events; other months are filtered out of the list
        today: Current moment, used to flag the current day
        grid_builder: Optional GridBuilder override
        aggregator: Optional EventAggregator override

    Returns:
        CalendarView with grid cells, grouped event summaries and navigation
    """
    grid_builder = grid_builder or GridBuilder()
    aggregator = aggregator or EventAggregator()

    cells = grid_builder.build_grid(reference_month, events, today)
    by_location = aggregator.aggregate_by_location(events, reference_month)

    locations = [
        (label, [summarize_event(event) for event in location_events])
        for label, location_events in by_location.items()
    ]

    view = CalendarView(
        title=month_label(reference_month),
        weekday_headers=list(WEEKDAY_HEADERS),
        cells=cells,
        locations=locations,
        previous_month=navigation_key(reference_month, -1),
        next_month=navigation_key(reference_month, 1)
    )
    logger.info(
        f"Built calendar view for {view.title}: "
        f"{sum(len(summaries) for _, summaries in locations)} event(s) "
        f"in {len(locations)} location(s)"
    )
    return view
