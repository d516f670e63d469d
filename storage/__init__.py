"""Init file for storage package"""
from storage.task_storage import TaskStorage, TaskFileError

__all__ = ['TaskStorage', 'TaskFileError']
