from .routing import MalformedGraph, RoutingError, WorkerError

__all__ = [
    "MalformedGraph",
    "RoutingError",
    "WorkerError",
]
