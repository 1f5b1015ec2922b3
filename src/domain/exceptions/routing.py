class RoutingError(Exception):
    """Base exception for journey planning failures."""


class MalformedGraph(RoutingError, ValueError):
    """Raised when a transit graph references unknown stops or carries invalid edges."""


class WorkerError(RoutingError):
    """Raised on the caller side when a dispatched pathfinding request fails."""

    def __init__(self, message: str, *, request_id: int | str | None = None) -> None:
        super().__init__(message)
        self.request_id = request_id
