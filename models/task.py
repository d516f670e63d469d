"""Task data model"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from itertools import count
from typing import Optional, Tuple


_ids = count(1)


def now_ms() -> int:
    """Current time as integer epoch milliseconds"""
    return int(datetime.now().timestamp() * 1000)


@dataclass
class Task:
    """Single to-do item.

    ``id`` is unique within the running process and survives ``copy()``;
    it is not written to disk, so tasks read from a file get fresh ids.
    """
    text: str
    completed: bool = False
    created_at: int = field(default_factory=now_ms)
    id: int = field(default_factory=lambda: next(_ids), compare=False)

    def __str__(self) -> str:
        return self.text

    def key(self) -> Tuple[int, str]:
        """Legacy (created_at, text) identity used by older tasks files"""
        return self.created_at, self.text

    def copy(self) -> 'Task':
        return replace(self)

    def update(self, text: Optional[str] = None, completed: Optional[bool] = None):
        """Update task in place"""
        if text is not None:
            self.text = text
        if completed is not None:
            self.completed = completed
