"""
Best-effort HTTP publisher for query records, using httpx.
"""

import logging
from typing import Optional

import httpx

from ipaddr_text.query.record import CONTENT_TYPE, QueryRecord

logger = logging.getLogger(__name__)


class RecordPublisher:
    """Pushes encoded query records to a collector endpoint."""

    def __init__(self, url: str, timeout: float = 2.0, token: Optional[str] = None):
        """Initialize publisher for a collector URL."""
        self.url = url
        self.headers = {"Content-Type": CONTENT_TYPE}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"
        self.client = httpx.Client(timeout=timeout, headers=self.headers)

    def __del__(self):
        """Close httpx client on deletion."""
        if hasattr(self, 'client'):
            self.client.close()

    def __enter__(self) -> "RecordPublisher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    def push(self, record: QueryRecord) -> bool:
        """
        Send one record. Failures are logged, never raised.

        Returns:
            True if the collector accepted the record, False otherwise
        """
        try:
            resp = self.client.post(self.url, content=record.encode())
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Failed to publish record to {self.url}: {e}")
            return False

        logger.debug(f"Published record for {record.address} to {self.url}")
        return True
