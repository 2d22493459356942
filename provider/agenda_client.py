"""HTTP client for the agenda event provider."""
import logging
import time
from typing import Any, List

import requests

logger = logging.getLogger(__name__)


class AgendaClient:
    """Client for the agenda JSON endpoint."""

    DEFAULT_URL = "http://localhost:3000/api/agenda"

    def __init__(self, url: str = DEFAULT_URL, timeout: int = 30, max_retries: int = 3):
        """
        Initialize the agenda client.

        Args:
            url: Agenda endpoint returning a JSON array of events
            timeout: HTTP request timeout in seconds (default: 30)
            max_retries: Attempts before giving up (default: 3)
        """
        self.url = url
        self.timeout = timeout
        self.max_retries = max(1, max_retries)

    def fetch_events(self) -> List[Any]:
        """
        Fetch the raw event payload.

        Failures never propagate: after the last failed attempt, or when the
        response is not a JSON array, an empty list is returned so the
        calendar still renders.

        Returns:
            Decoded list of event objects, or an empty list
        """
        logger.info(f"Fetching events from {self.url}")

        try:
            response = self._get_with_retry()
        except requests.RequestException as e:
            logger.error(f"Failed to load events, rendering without them: {e}")
            return []

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Agenda response is not valid JSON: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(
                f"Agenda response is a {type(data).__name__}, not a list; "
                f"treating as no events"
            )
            return []

        logger.info(f"Successfully fetched {len(data)} events")
        return data

    def _get_with_retry(self) -> requests.Response:
        """
        GET the agenda endpoint with exponential backoff.

        Returns:
            Successful response

        Raises:
            requests.RequestException: If all retry attempts fail
        """
        base_delay = 1  # seconds

        for attempt in range(self.max_retries):
            try:
                logger.info(f"Requesting agenda (attempt {attempt + 1}/{self.max_retries})")
                response = requests.get(self.url, timeout=self.timeout)
                response.raise_for_status()
                return response

            except requests.RequestException as e:
                if attempt < self.max_retries - 1:
                    delay = base_delay * (2 ** attempt)
                    logger.warning(
                        f"Request failed (attempt {attempt + 1}/{self.max_retries}): {e}. "
                        f"Retrying in {delay} seconds..."
                    )
                    time.sleep(delay)
                else:
                    logger.error(
                        f"All {self.max_retries} retry attempts failed. Last error: {e}"
                    )
                    raise
