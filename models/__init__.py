"""Init file for models package"""
from models.task import Task
from models.task_store import TaskStore, TaskError, EmptyTaskError, InvalidSelectionError
from models.undo_buffer import UndoBuffer
from models.view_filter import FilterMode, project, project_indexed

__all__ = [
    'Task', 'TaskStore', 'TaskError', 'EmptyTaskError', 'InvalidSelectionError',
    'UndoBuffer', 'FilterMode', 'project', 'project_indexed',
]
