from .direct_pathfinder import DirectPathfinder
from .thread_pathfinder import PathfinderWorker, PathfinderWorkerClient

__all__ = ["DirectPathfinder", "PathfinderWorker", "PathfinderWorkerClient"]
