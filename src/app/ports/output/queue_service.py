from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

# Decoded JSON body; journey requests carry type, requestId, startId, endId.
QueueMessage = Mapping[str, Any]


class IQueueService(ABC):
    """Transport for journey requests planned by the background worker."""

    @abstractmethod
    def send_request(self, message: QueueMessage) -> str:
        """Enqueue one request; returns the transport's message id."""

    @abstractmethod
    def receive_requests(
        self, *, max_messages: int = 1, wait_time_s: int = 10
    ) -> list[QueueMessage]:
        """Take up to max_messages requests off the queue.

        Received messages are removed from the queue; an empty list means
        nothing arrived within wait_time_s.
        """
