"""Clients for external services."""

from ipaddr_text.clients.publisher import RecordPublisher

__all__ = ["RecordPublisher"]
