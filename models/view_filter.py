"""Read-only filtered projections of the task store"""
from enum import Enum
from typing import Iterable, Tuple

from models.task import Task


class FilterMode(Enum):
    ALL = "All"
    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def from_label(cls, label: str) -> 'FilterMode':
        return cls(label)

    def matches(self, task: Task) -> bool:
        if self is FilterMode.PENDING:
            return not task.completed
        if self is FilterMode.COMPLETED:
            return task.completed
        return True


def project_indexed(tasks: Iterable[Task], mode: FilterMode) -> Tuple[Tuple[int, Task], ...]:
    """Tasks matching ``mode`` paired with their index in ``tasks``, in order"""
    return tuple((i, t) for i, t in enumerate(tasks) if mode.matches(t))


def project(tasks: Iterable[Task], mode: FilterMode) -> Tuple[Task, ...]:
    """Tasks matching ``mode`` in store order. Never mutates ``tasks``."""
    return tuple(t for t in tasks if mode.matches(t))
