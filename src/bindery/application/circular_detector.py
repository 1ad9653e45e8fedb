"""Application layer - Cyclic dependency detection."""

import threading
from typing import Hashable, List, Optional, Tuple

from bindery.domain import CyclicDependencyError

ResolutionKey = Tuple[Hashable, Optional[Hashable]]


class CircularDependencyDetector:
    """Detects cycles during resolution.

    Uses thread-local storage to track the current resolution stack of
    ``(service_id, request_context)`` keys. When a key appears twice in the
    stack, a cycle is detected.

    Attributes:
        _local: Thread-local storage for resolution stacks.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    def _get_stack(self) -> List[ResolutionKey]:
        if not hasattr(self._local, "stack"):
            self._local.stack = []
        return self._local.stack

    def push(self, key: ResolutionKey) -> None:
        """Add a key to the resolution stack.

        Args:
            key: The ``(service_id, request_context)`` pair being resolved.

        Raises:
            CyclicDependencyError: If the key is already in the stack.

        Example:
            >>> detector = CircularDependencyDetector()
            >>> detector.push(("A", None))
            >>> detector.push(("B", None))
            >>> detector.push(("A", None))  # Raises CyclicDependencyError
        """
        stack = self._get_stack()

        if key in stack:
            cycle_start_index = stack.index(key)
            path = [service_id for service_id, _ in stack[cycle_start_index:]] + [key[0]]
            raise CyclicDependencyError(path)

        stack.append(key)

    def pop(self) -> None:
        """Remove the last key from the resolution stack."""
        stack = self._get_stack()
        if stack:
            stack.pop()

    def depth(self) -> int:
        return len(self._get_stack())

    def clear(self) -> None:
        """Clear the current thread's resolution stack."""
        if hasattr(self._local, "stack"):
            self._local.stack.clear()
