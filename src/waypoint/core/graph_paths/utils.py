"""
Utility functions for path finding operations.
"""

import gc
import math
import os
import time
from heapq import heappop, heappush
from typing import Any, Dict, List, Optional, Sequence, Tuple

import psutil

from ..exceptions import InvalidWeightError
from ..types import WeightFunc

# Constants
EPSILON = 1e-10  # Floating point comparison tolerance
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between two RSS samples


def get_edge_weight(edge: Any, weight_func: WeightFunc) -> float:
    """Get the weight of an edge, enforcing a finite, non-negative number."""
    weight = weight_func(edge)
    if not isinstance(weight, (int, float)):
        raise InvalidWeightError(f"Weight must be numeric, got {type(weight).__name__}")
    if math.isnan(weight) or math.isinf(weight):
        raise InvalidWeightError("Edge weight must be finite number")
    if weight < 0:
        raise InvalidWeightError(f"Edge weight must be non-negative, got {weight}")
    return float(weight)


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """Compare costs with floating point tolerance.

    Returns True only if new_cost is smaller than old_cost by more than
    EPSILON, so equal-cost alternatives never replace an existing record.
    """
    return (new_cost - old_cost) < -EPSILON


def calculate_path_weight(graph: Any, vertex_ids: Sequence[str], weight_func: WeightFunc) -> float:
    """Sum the weights of the edges joining consecutive vertex ids."""
    total = 0.0
    for from_id, to_id in zip(vertex_ids, vertex_ids[1:]):
        total += get_edge_weight(graph.get_edge(from_id, to_id), weight_func)
    return total


def reconstruct_ids(predecessors: Dict[str, Optional[str]], target_id: str) -> List[str]:
    """Walk a predecessor map back from target_id and return ids start-first."""
    ids = []
    current: Optional[str] = target_id
    while current is not None:
        ids.append(current)
        current = predecessors[current]
    ids.reverse()
    return ids


class PriorityQueue:
    """Priority queue with decrease-key, using lazy invalidation of stale heap entries."""

    def __init__(self):
        self._queue: List[Tuple[float, int, str]] = []
        self._entry_finder: Dict[str, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties in insertion order

    def add_or_update(self, item: str, priority: float) -> None:
        """Insert item, or lower its priority if the new one is better."""
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            if not is_better_cost(priority, old_priority):
                return

        entry = (priority, self._counter, item)
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1

    def pop(self) -> Optional[Tuple[float, str]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __contains__(self, item: str) -> bool:
        return item in self._entry_finder

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """Memory management utilities for graph searches."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = MEMORY_CHECK_INTERVAL

    def check_memory(self) -> None:
        """Sample memory usage and enforce the limit, if any."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            # Try to reclaim memory
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Get peak memory usage in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.time()


_process: Optional[psutil.Process] = None


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    global _process
    if _process is None or _process.pid != os.getpid():
        _process = psutil.Process(os.getpid())
    return _process.memory_info().rss
