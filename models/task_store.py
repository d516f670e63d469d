"""Task store with change signals for the UI"""
from typing import Iterable, Iterator, List, Optional, Tuple
from PyQt6.QtCore import QObject, pyqtSignal

from models.task import Task
from models.undo_buffer import UndoBuffer


class TaskError(Exception):
    """Base class for rejected store operations"""


class EmptyTaskError(TaskError, ValueError):
    """Task text is empty after trimming"""


class InvalidSelectionError(TaskError, IndexError):
    """Index does not refer to a task in the store"""


class TaskStore(QObject):
    """Authoritative ordered list of tasks plus the delete history.

    Every mutation happens synchronously and emits one signal afterwards,
    so views only need to re-project on notification.
    """

    task_added = pyqtSignal(Task)
    task_updated = pyqtSignal(Task)
    task_deleted = pyqtSignal(Task)
    tasks_cleared = pyqtSignal(int)
    tasks_loaded = pyqtSignal()

    def __init__(self, tasks: Iterable[Task] = (), parent: QObject = None):
        super().__init__(parent)
        self._tasks: List[Task] = list(tasks)
        self.undo_buffer = UndoBuffer()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def __getitem__(self, index: int) -> Task:
        return self._tasks[self._check_index(index)]

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_buffer)

    def _check_index(self, index: int) -> int:
        # 负数也视为无效 (-1 表示界面上没有选中项)
        if not isinstance(index, int) or not 0 <= index < len(self._tasks):
            raise InvalidSelectionError(f"invalid selection: {index!r}")
        return index

    @staticmethod
    def _clean_text(text: str) -> str:
        text = (text or "").strip()
        if not text:
            raise EmptyTaskError("task text must not be empty")
        return text

    def add(self, text: str) -> Task:
        """Append a new pending task stamped with the current time"""
        task = Task(text=self._clean_text(text))
        self._tasks.append(task)
        self.task_added.emit(task)
        return task

    def edit(self, index: int, new_text: str) -> Task:
        """Replace the text of a task, keeping timestamp and completion"""
        text = self._clean_text(new_text)
        task = self._tasks[self._check_index(index)]
        task.update(text=text)
        self.task_updated.emit(task)
        return task

    def toggle_complete(self, index: int) -> Task:
        task = self._tasks[self._check_index(index)]
        task.update(completed=not task.completed)
        self.task_updated.emit(task)
        return task

    def remove(self, index: int) -> Task:
        """Remove a task; a copy goes onto the undo buffer"""
        task = self._tasks.pop(self._check_index(index))
        self.undo_buffer.push(task)
        self.task_deleted.emit(task)
        return task

    def clear_completed(self) -> int:
        """Drop every completed task and return how many were removed"""
        remaining = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(remaining)
        if removed:
            self._tasks = remaining
            self.tasks_cleared.emit(removed)
        return removed

    def undo(self) -> Optional[Task]:
        """Restore the most recently deleted task at the end of the list.

        Returns None when there is nothing to undo.
        """
        task = self.undo_buffer.pop()
        if task is None:
            return None
        self._tasks.append(task)
        self.task_added.emit(task)
        return task

    def load(self, tasks: Iterable[Task]):
        """Replace all tasks, e.g. with the contents of the tasks file"""
        self._tasks = list(tasks)
        self.undo_buffer.clear()
        self.tasks_loaded.emit()
