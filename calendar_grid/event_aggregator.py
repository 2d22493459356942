"""Grouping of events by month and by normalized location."""
import logging
from typing import Dict, Iterable, List

from calendar_grid.labels import DateLike, month_label, normalize_location, same_month
from processor.models import EventRecord

logger = logging.getLogger(__name__)

LocationGroups = Dict[str, List[EventRecord]]
GroupedEvents = Dict[str, LocationGroups]


class EventAggregator:
    """Partitions a flat event list into month and location buckets."""

    def aggregate_by_month_and_location(
        self,
        events: Iterable[EventRecord]
    ) -> GroupedEvents:
        """
        Group events by month label, then by location label.

        Buckets are created on first use and keep the input order of the
        events; nothing is sorted.

        Args:
            events: Events to group

        Returns:
            Mapping of month label to location label to events
        """
        grouped: GroupedEvents = {}
        for event in events:
            month = month_label(event.timestamp)
            location = normalize_location(event.city)
            grouped.setdefault(month, {}).setdefault(location, []).append(event)

        logger.debug(f"Grouped events into {len(grouped)} month(s)")
        return grouped

    def aggregate_by_location(
        self,
        events: Iterable[EventRecord],
        reference_month: DateLike
    ) -> LocationGroups:
        """
        Group the events of one month by location label.

        Args:
            events: Events to filter and group
            reference_month: Any date within the month to keep

        Returns:
            Mapping of location label to that month's events, in input order
        """
        target = month_label(reference_month)
        grouped: LocationGroups = {}
        for event in events:
            if not same_month(event.timestamp, reference_month):
                continue
            grouped.setdefault(normalize_location(event.city), []).append(event)

        logger.debug(f"Grouped {target} events into {len(grouped)} location(s)")
        return grouped
