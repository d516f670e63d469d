"""LIFO history of deleted tasks"""
from typing import List, Optional

from models.task import Task


class UndoBuffer:
    """Stack of independent task copies, most recent on top"""

    def __init__(self):
        self._stack: List[Task] = []

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)

    def push(self, task: Task):
        self._stack.append(task.copy())

    def pop(self) -> Optional[Task]:
        """Remove and return the most recent entry, None when empty"""
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self) -> Optional[Task]:
        """Most recent entry without removing it, None when empty"""
        return self._stack[-1] if self._stack else None

    def clear(self):
        self._stack.clear()
