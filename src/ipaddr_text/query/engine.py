"""Top-level query engine: parse an address, record it, publish the record."""

import logging
from dataclasses import dataclass
from typing import Optional

from ipaddr_text.clients.publisher import RecordPublisher
from ipaddr_text.config import Config
from ipaddr_text.grammar.parser import parse_strict
from ipaddr_text.ip.address import IpAddress
from ipaddr_text.query.record import QueryRecord
from ipaddr_text.query.timestamp import Timestamp

logger = logging.getLogger(__name__)


@dataclass
class QueryOutcome:
    """What one query produced."""

    address: IpAddress
    timestamp: Timestamp
    record: QueryRecord
    published: bool = False


class QueryEngine:
    """Runs one address query end to end."""

    def __init__(self, config: Config, publish: bool = True):
        self.config = config
        self.publisher: Optional[RecordPublisher] = None
        if publish and config.publish_enabled:
            self.publisher = RecordPublisher(
                url=config.publish_url,
                timeout=config.publish_timeout,
                token=config.publish_token,
            )

    def close(self) -> None:
        if self.publisher is not None:
            self.publisher.close()

    def run(self, text: str) -> QueryOutcome:
        """Parse ``text`` and publish a record of it.

        Args:
            text: Candidate address as typed by the user.

        Returns:
            The parsed address with the record built for it.

        Raises:
            ParseError: If the address is malformed; nothing is published.
        """
        timestamp = Timestamp.now()
        logger.info("Query at %s for %r", timestamp, text)

        address = parse_strict(text)
        logger.info("Parsed IPv%d address %s", address.version, address)

        record = QueryRecord.build(address, timestamp)
        outcome = QueryOutcome(address=address, timestamp=timestamp, record=record)

        if self.publisher is None:
            logger.debug("Publishing disabled, record not sent")
        else:
            outcome.published = self.publisher.push(record)

        return outcome
