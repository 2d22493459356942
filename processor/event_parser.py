"""Event parser for validating and converting provider payloads."""
import logging
from datetime import datetime
from typing import Any, List, Optional

from processor.models import EventRecord

logger = logging.getLogger(__name__)


class EventParser:
    """Converts decoded agenda payloads into EventRecord objects."""

    # Provider field names first, English aliases second
    FIELD_ALIASES = {
        'title': ('titulo', 'title'),
        'timestamp': ('data', 'timestamp'),
        'venue_name': ('local', 'venueName', 'venue_name'),
        'city': ('cidade', 'city'),
        'created_at': ('createdAt', 'created_at'),
    }

    TIMESTAMP_FORMATS = [
        '%Y-%m-%d %H:%M:%S',
        '%Y-%m-%d %H:%M',
        '%d/%m/%Y %H:%M',
        '%d/%m/%Y',
    ]

    def parse_events(self, payload: Any) -> List[EventRecord]:
        """
        Parse and validate a decoded event payload.

        Anything other than a list is treated as an empty event set.
        Items missing an id, a title or a parseable timestamp are skipped.

        Args:
            payload: Decoded JSON from the agenda provider

        Returns:
            List of valid EventRecord objects, in payload order
        """
        if not isinstance(payload, list):
            logger.warning(
                f"Expected a list of events, got {type(payload).__name__}; "
                f"treating as empty"
            )
            return []

        records = []
        for item in payload:
            record = self._parse_single_event(item)
            if record:
                records.append(record)

        logger.info(
            f"Parsed {len(records)} valid events out of "
            f"{len(payload)} total events"
        )
        return records

    def _parse_single_event(self, item: Any) -> Optional[EventRecord]:
        """
        Parse a single payload item.

        Args:
            item: One element of the provider payload

        Returns:
            EventRecord or None if validation fails
        """
        if not isinstance(item, dict):
            logger.warning(f"Skipping non-object event entry: {item!r}")
            return None

        event_id = self._parse_id(item.get('id'))
        if event_id is None:
            logger.warning(f"Event missing valid id: {item.get('id')!r}")
            return None

        title = self._field(item, 'title')
        if not isinstance(title, str) or not title.strip():
            logger.warning(f"Event {event_id} missing required field: title")
            return None

        raw_timestamp = self._field(item, 'timestamp')
        timestamp = self.parse_timestamp(raw_timestamp)
        if timestamp is None:
            logger.warning(
                f"Invalid timestamp for event '{title}': {raw_timestamp!r}"
            )
            return None

        return EventRecord(
            id=event_id,
            title=title,
            timestamp=timestamp,
            venue_name=self._optional_text(self._field(item, 'venue_name')),
            city=self._optional_text(self._field(item, 'city')),
            created_at=self._optional_text(self._field(item, 'created_at'))
        )

    def _field(self, item: dict, name: str) -> Any:
        for key in self.FIELD_ALIASES[name]:
            if key in item:
                return item[key]
        return None

    def _parse_id(self, value: Any) -> Optional[int]:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().lstrip('-').isdigit():
            return int(value.strip())
        return None

    def _optional_text(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    def parse_timestamp(self, value: Any) -> Optional[datetime]:
        """
        Parse a provider timestamp.

        ISO 8601 is tried first (a trailing "Z" is read as UTC), then a few
        common formats. Bare dates parse as midnight.

        Args:
            value: Timestamp string

        Returns:
            datetime or None if parsing fails
        """
        if not isinstance(value, str) or not value.strip():
            return None

        text = value.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'

        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass

        for fmt in self.TIMESTAMP_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue

        return None
