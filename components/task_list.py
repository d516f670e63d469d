from typing import Iterable, Optional, Tuple
from PyQt6.QtWidgets import QListWidget, QListWidgetItem, QStyledItemDelegate, QAbstractItemView
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QPalette

from models import Task
from constants import DONE_COLOR, CHECK_MARK, BG_COLOR, BORDER_COLOR, ACCENT_COLOR

STORE_INDEX_ROLE = Qt.ItemDataRole.UserRole
COMPLETED_ROLE = Qt.ItemDataRole.UserRole + 1
TASK_ID_ROLE = Qt.ItemDataRole.UserRole + 2


class TaskItemDelegate(QStyledItemDelegate):
    """Completed tasks: gray, struck through, check mark in front"""

    def initStyleOption(self, option, index):
        super().initStyleOption(option, index)
        if index.data(COMPLETED_ROLE):
            option.font.setStrikeOut(True)
            option.palette.setColor(QPalette.ColorRole.Text, QColor(DONE_COLOR))
            option.palette.setColor(QPalette.ColorRole.HighlightedText, QColor(DONE_COLOR))
            option.text = f"{CHECK_MARK} {option.text}"


class TaskListWidget(QListWidget):
    """Shows a projection of the store; each row remembers its store index"""

    delete_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setItemDelegate(TaskItemDelegate(self))
        self.setStyleSheet(f"""
            QListWidget {{ background: {BG_COLOR}; color: white; border: 1px solid {BORDER_COLOR}; }}
            QListWidget::item {{ padding: 4px; }}
            QListWidget::item:selected {{ background: {ACCENT_COLOR}; }}
        """)

    def set_rows(self, rows: Iterable[Tuple[int, Task]]):
        """Replace rows with (store_index, task) pairs, keeping the selected task if still shown"""
        selected_id = self.selected_task_id()
        self.clear()
        for store_index, task in rows:
            item = QListWidgetItem(task.text)
            item.setData(STORE_INDEX_ROLE, store_index)
            item.setData(COMPLETED_ROLE, task.completed)
            item.setData(TASK_ID_ROLE, task.id)
            self.addItem(item)
            if task.id == selected_id:
                self.setCurrentItem(item)

    def selected_task_id(self) -> Optional[int]:
        item = self.currentItem()
        return item.data(TASK_ID_ROLE) if item is not None and item.isSelected() else None

    def selected_store_index(self) -> int:
        """Store index of the selected row, -1 when nothing is selected"""
        item = self.currentItem()
        if item is None or not item.isSelected():
            return -1
        return item.data(STORE_INDEX_ROLE)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Delete:
            self.delete_requested.emit()
            event.accept()
        else:
            super().keyPressEvent(event)
