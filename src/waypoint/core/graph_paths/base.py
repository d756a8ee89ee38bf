import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from time import time
from typing import Generator, Optional, Tuple

from ..types import GraphProtocol
from .models import Path, SearchMetrics
from .utils import MemoryManager

logger = logging.getLogger(__name__)


class PathFinder[V](ABC):
    """Abstract base class for path search algorithms.

    Subclasses implement ``_search`` on resolved endpoints; ``find_path``
    resolves ids, handles the absent-endpoint case and records metrics.
    """

    operation = "path_search"

    def __init__(self, graph: GraphProtocol, max_memory_mb: Optional[float] = None):
        """Initialize finder with graph and optional memory limit."""
        self.graph = graph
        self.memory_manager = MemoryManager(max_memory_mb)

    @contextmanager
    def _search_context(self, metrics: SearchMetrics) -> Generator[None, None, None]:
        """Context manager for search state."""
        self.memory_manager.reset_peak_memory()
        try:
            yield
        finally:
            metrics.end_time = time()
            metrics.max_memory_used = self.memory_manager.peak_memory

    def resolve_endpoints(self, start_id: str, target_id: str) -> Optional[Tuple[V, V]]:
        """Resolve both ids to registered vertices, or None if either is unknown."""
        start = self.graph.get_vertex_by_id(start_id)
        target = self.graph.get_vertex_by_id(target_id)
        if start is None or target is None:
            return None
        return start, target

    def find_path(self, start_id: str, target_id: str, **kwargs) -> Optional[Path[V]]:
        """Find a path from start_id to target_id.

        Returns:
            The discovered path, or None if either id is unknown or the
            target cannot be reached from the start.
        """
        endpoints = self.resolve_endpoints(start_id, target_id)
        if endpoints is None:
            logger.debug(f"{self.operation}: unknown endpoint in {start_id} -> {target_id}")
            return None

        start, target = endpoints
        metrics = SearchMetrics(operation=self.operation, start_time=time())
        logger.debug(f"Starting {self.operation} from {start_id} to {target_id}")

        with self._search_context(metrics):
            path = self._search(start, target, metrics, **kwargs)

        if path is None:
            logger.debug(
                f"{self.operation}: no path from {start_id} to {target_id} "
                f"({metrics.nodes_explored} vertices explored)"
            )
            return None

        metrics.path_length = len(path)
        path.metrics = metrics
        logger.debug(f"{self.operation}: {path} {metrics.to_dict()}")
        return path

    @abstractmethod
    def _search(self, start: V, target: V, metrics: SearchMetrics, **kwargs) -> Optional[Path[V]]:
        """Run the search between two resolved vertices."""
        pass
