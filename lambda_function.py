"""AWS Lambda handler serving the monthly agenda calendar."""
import json
import logging
import os
import time
from datetime import datetime
from typing import Dict, Any

from provider.agenda_client import AgendaClient
from processor.event_parser import EventParser
from calendar_grid.calendar_view import build_calendar_view
from calendar_grid.labels import parse_month


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


def _requested_month(event: Dict[str, Any], now: datetime):
    """Read the YYYY-MM month query parameter, defaulting to the current month."""
    params = (event or {}).get('queryStringParameters') or {}
    month = params.get('month')
    if not month:
        return now.date().replace(day=1)
    return parse_month(month)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main Lambda handler function for the agenda calendar.

    Args:
        event: API Gateway event payload
        context: Lambda context object

    Returns:
        Response dict with statusCode and the calendar view as JSON body
    """
    agenda_url = os.environ.get('AGENDA_URL', AgendaClient.DEFAULT_URL)
    log_level = os.environ.get('LOG_LEVEL', 'INFO')
    timeout_seconds = int(os.environ.get('TIMEOUT_SECONDS', '30'))
    max_retries = int(os.environ.get('MAX_RETRIES', '3'))

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    start_time = time.time()
    now = datetime.now()
    logger.info(
        f"Lambda execution started",
        extra={
            'agenda_url': agenda_url,
            'timeout_seconds': timeout_seconds
        }
    )

    try:
        try:
            reference_month = _requested_month(event, now)
        except ValueError as e:
            logger.warning(f"Rejected invalid month parameter: {e}")
            return {
                'statusCode': 400,
                'body': json.dumps({
                    'message': 'Invalid month, expected YYYY-MM',
                    'error': str(e)
                })
            }

        client = AgendaClient(
            url=agenda_url,
            timeout=timeout_seconds,
            max_retries=max_retries
        )
        parser = EventParser()

        logger.info("Fetching events from agenda")
        raw_events = client.fetch_events()

        logger.info("Parsing and validating events")
        events = parser.parse_events(raw_events)

        logger.info(f"Building calendar view for {reference_month:%Y-%m}")
        view = build_calendar_view(reference_month, events, now)

        duration = time.time() - start_time
        logger.info(
            f"Lambda execution completed successfully",
            extra={
                'duration_seconds': round(duration, 2),
                'events': len(events)
            }
        )

        body = view.to_dict()
        body['statistics'] = {
            'raw_events_fetched': len(raw_events),
            'valid_events': len(events),
            'duration_seconds': round(duration, 2)
        }
        return {
            'statusCode': 200,
            'headers': {'Content-Type': 'application/json; charset=utf-8'},
            'body': json.dumps(body, ensure_ascii=False)
        }

    except Exception as e:
        duration = time.time() - start_time

        logger.error(
            f"Lambda execution failed: {str(e)}",
            extra={
                'duration_seconds': round(duration, 2),
                'error_type': type(e).__name__
            },
            exc_info=True
        )

        return {
            'statusCode': 500,
            'body': json.dumps({
                'message': 'Failed to build calendar',
                'error': str(e),
                'error_type': type(e).__name__,
                'duration_seconds': round(duration, 2)
            })
        }
