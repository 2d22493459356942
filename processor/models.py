"""Data models for the agenda calendar."""
from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import List, Optional


@dataclass(frozen=True)
class EventRecord:
    """Event occurrence as delivered by the agenda provider."""
    id: int
    title: str
    timestamp: datetime
    venue_name: Optional[str] = None
    city: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CalendarCell:
    """One slot of the month grid: a day or blank padding."""
    date: Optional[date]
    is_current_month: bool = False
    is_today: bool = False
    has_event: bool = False

    @classmethod
    def blank(cls) -> "CalendarCell":
        return cls(date=None)

    @property
    def is_blank(self) -> bool:
        return self.date is None

    def to_dict(self) -> dict:
        return {
            'date': self.date.isoformat() if self.date else None,
            'day': self.date.day if self.date else None,
            'is_current_month': self.is_current_month,
            'is_today': self.is_today,
            'has_event': self.has_event
        }


@dataclass
class EventSummary:
    """Display fields of an event card in the month list."""
    id: int
    title: str
    day: str
    month: str
    time: str
    place: Optional[str]


@dataclass
class CalendarView:
    """Everything the renderer needs to draw one month."""
    title: str
    weekday_headers: List[str]
    cells: List[CalendarCell]
    locations: List[tuple] = field(default_factory=list)
    previous_month: str = ''
    next_month: str = ''

    @property
    def is_empty(self) -> bool:
        return not self.locations

    def to_dict(self) -> dict:
        return {
            'title': self.title,
            'weekday_headers': list(self.weekday_headers),
            'cells': [cell.to_dict() for cell in self.cells],
            'locations': [
                {
                    'label': label,
                    'events': [asdict(summary) for summary in summaries]
                }
                for label, summaries in self.locations
            ],
            'previous_month': self.previous_month,
            'next_month': self.next_month,
            'is_empty': self.is_empty
        }
