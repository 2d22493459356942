"""Month grid construction with blank padding and event markers."""
import calendar
import logging
from datetime import date, timedelta
from typing import Iterable, List

from calendar_grid.labels import DateLike, calendar_date, same_day, sunday_weekday
from processor.models import CalendarCell, EventRecord

logger = logging.getLogger(__name__)


class GridBuilder:
    """Builds the Sunday-first, 7-column day grid of a month."""

    DAYS_PER_WEEK = 7

    def build_grid(
        self,
        reference_month: DateLike,
        events: Iterable[EventRecord],
        today: DateLike
    ) -> List[CalendarCell]:
        """
        Build the grid cells for the month containing reference_month.

        Blanks pad the grid before the 1st so it lands on its weekday
        column, and after the last day so the grid fills whole weeks.

        Args:
            reference_month: Any date within the month to display
            events: Events used to flag days that have at least one event
            today: Current moment, used to flag the current day

        Returns:
            Cells in chronological order; length is a multiple of 7
        """
        month_days = self._month_days(reference_month)
        event_days = {calendar_date(event.timestamp) for event in events}

        leading = sunday_weekday(month_days[0])
        total = leading + len(month_days)
        trailing = -total % self.DAYS_PER_WEEK

        cells = [CalendarCell.blank() for _ in range(leading)]
        for day in month_days:
            cells.append(
                CalendarCell(
                    date=day,
                    is_current_month=True,
                    is_today=same_day(day, today),
                    has_event=day in event_days
                )
            )
        cells.extend(CalendarCell.blank() for _ in range(trailing))

        logger.debug(
            f"Built grid for {month_days[0]:%Y-%m}: {len(cells)} cells, "
            f"{leading} leading and {trailing} trailing blanks"
        )
        return cells

    def rows(self, cells: List[CalendarCell]) -> List[List[CalendarCell]]:
        """Split a flat cell list into weeks."""
        return [
            cells[i:i + self.DAYS_PER_WEEK]
            for i in range(0, len(cells), self.DAYS_PER_WEEK)
        ]

    def _month_days(self, reference_month: DateLike) -> List[date]:
        start = date(reference_month.year, reference_month.month, 1)
        days_in_month = calendar.monthrange(start.year, start.month)[1]
        return [start + timedelta(days=offset) for offset in range(days_in_month)]
