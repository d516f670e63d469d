#!/usr/bin/env python3
import sys
import os
import logging

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit, QComboBox, QGroupBox, QMessageBox
)
from PyQt6.QtCore import QSize

from models import TaskStore, FilterMode, project_indexed, EmptyTaskError, InvalidSelectionError
from storage import TaskStorage, TaskFileError
from components.task_list import TaskListWidget
from components.inline_editor import InlineEditor
from constants import (
    WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT, BUTTON_WIDTH, BUTTON_HEIGHT,
    FILTER_LABELS, BG_COLOR, PANEL_COLOR, BORDER_COLOR
)

logger = logging.getLogger(__name__)


class TaskManagerWindow(QMainWindow):
    def __init__(self, store: TaskStore, storage: TaskStorage):
        super().__init__()
        self.store = store
        self.storage = storage
        self.filter_mode = FilterMode.ALL
        self.editor = None

        self.setWindowTitle(WINDOW_TITLE)
        self.init_ui()

        # 任何变更都重新投影一次列表
        self.store.task_added.connect(self.refresh_view)
        self.store.task_updated.connect(self.refresh_view)
        self.store.task_deleted.connect(self.refresh_view)
        self.store.tasks_cleared.connect(self.refresh_view)
        self.store.tasks_loaded.connect(self.refresh_view)

        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.center_on_screen()
        self.refresh_view()

    def init_ui(self):
        self.main_widget = QWidget()
        self.setCentralWidget(self.main_widget)
        self.main_layout = QVBoxLayout(self.main_widget)
        self.main_layout.setContentsMargins(8, 8, 8, 8)
        self.main_layout.setSpacing(8)

        # 顶部：输入框 + 添加
        top = QHBoxLayout()
        self.task_field = QLineEdit()
        self.task_field.setPlaceholderText("New task")
        self.add_btn = QPushButton("Add")
        top.addWidget(self.task_field, stretch=1)
        top.addWidget(self.add_btn)
        self.main_layout.addLayout(top)

        # 中间：任务列表 + 右侧按钮
        middle = QHBoxLayout()
        list_box = QGroupBox("Tasks")
        list_layout = QVBoxLayout(list_box)
        self.task_list = TaskListWidget()
        list_layout.addWidget(self.task_list)
        middle.addWidget(list_box, stretch=1)

        right = QVBoxLayout()
        self.edit_btn = QPushButton("Edit")
        self.delete_btn = QPushButton("Delete")
        self.complete_btn = QPushButton("Toggle Complete")
        self.clear_btn = QPushButton("Clear Completed")
        self.undo_btn = QPushButton("Undo Delete")
        for btn in (self.edit_btn, self.delete_btn, self.complete_btn, self.clear_btn, self.undo_btn):
            btn.setFixedSize(QSize(BUTTON_WIDTH, BUTTON_HEIGHT))
            right.addWidget(btn)
        right.addStretch()
        middle.addLayout(right)
        self.main_layout.addLayout(middle, stretch=1)

        # 底部：筛选
        bottom = QHBoxLayout()
        bottom.addWidget(QLabel("Filter:"))
        self.filter_combo = QComboBox()
        self.filter_combo.addItems(FILTER_LABELS)
        bottom.addWidget(self.filter_combo)
        bottom.addStretch()
        self.main_layout.addLayout(bottom)

        self.add_btn.clicked.connect(self.on_add)
        self.task_field.returnPressed.connect(self.on_add)
        self.edit_btn.clicked.connect(self.on_edit)
        self.delete_btn.clicked.connect(self.on_delete)
        self.complete_btn.clicked.connect(self.on_toggle_complete)
        self.clear_btn.clicked.connect(self.on_clear_completed)
        self.undo_btn.clicked.connect(self.on_undo)
        self.filter_combo.currentTextChanged.connect(self.on_filter_changed)
        self.task_list.itemDoubleClicked.connect(lambda _item: self.on_edit())
        self.task_list.delete_requested.connect(self.on_delete)

        self.setStyleSheet(f"""
            QMainWindow, QWidget {{ background-color: {BG_COLOR}; color: #FFFFFF; }}
            QGroupBox {{ border: 1px solid {BORDER_COLOR}; margin-top: 12px; }}
            QGroupBox::title {{ subcontrol-origin: margin; left: 8px; }}
            QLineEdit, QComboBox {{ background: {PANEL_COLOR}; border: 1px solid {BORDER_COLOR}; padding: 4px; }}
            QPushButton {{ background: {BORDER_COLOR}; border: none; border-radius: 4px; }}
            QPushButton:hover {{ background: #4A5059; }}
        """)

    def center_on_screen(self):
        screen = QApplication.primaryScreen()
        if screen is None: return
        geo = self.frameGeometry()
        geo.moveCenter(screen.availableGeometry().center())
        self.move(geo.topLeft())

    # --- 对话框 (测试中可替换) ---
    def warn(self, title, text):
        QMessageBox.warning(self, title, text)

    def inform(self, title, text):
        QMessageBox.information(self, title, text)

    def confirm(self, title, text) -> bool:
        answer = QMessageBox.question(
            self, title, text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        return answer == QMessageBox.StandardButton.Yes

    def show_status(self, text):
        self.statusBar().showMessage(text, 3000)

    # --- 视图 ---
    def refresh_view(self, *_):
        self.task_list.set_rows(project_indexed(self.store, self.filter_mode))

    def on_filter_changed(self, label):
        self.filter_mode = FilterMode.from_label(label)
        self.refresh_view()

    def selected_index(self, action) -> int:
        idx = self.task_list.selected_store_index()
        if idx == -1:
            self.inform("No selection", f"Select a task to {action}.")
        return idx

    # --- 操作 ---
    def on_add(self):
        try:
            task = self.store.add(self.task_field.text())
        except EmptyTaskError:
            self.warn("Input required", "Please enter a task.")
            return
        self.task_field.clear()
        self.show_status(f"Added: {task.text}")

    def on_edit(self):
        idx = self.selected_index("edit")
        if idx == -1: return
        if self.editor is not None and not self.editor.finalized: return

        item = self.task_list.currentItem()
        rect = self.task_list.visualItemRect(item)
        task_id = self.store[idx].id
        self.editor = InlineEditor(
            self.task_list.viewport(), rect, self.store[idx].text,
            lambda text: self.on_edit_finished(task_id, text)
        )
        self.editor.show()
        self.editor.setFocus()

    def on_edit_finished(self, task_id, text):
        # 编辑期间列表可能已变化，按 id 重新定位
        idx = next((i for i, t in enumerate(self.store) if t.id == task_id), -1)
        try:
            task = self.store.edit(idx, text)
        except EmptyTaskError:
            self.warn("Invalid", "Task cannot be empty.")
            return
        except InvalidSelectionError:
            logger.warning("Edited task %s no longer exists", task_id)
            return
        self.show_status(f"Edited: {task.text}")

    def on_delete(self):
        idx = self.selected_index("delete")
        if idx == -1: return
        task = self.store[idx]
        if not self.confirm("Confirm delete", f"Delete selected task?\n\n{task.text}"):
            return
        self.store.remove(idx)
        self.show_status(f"Deleted: {task.text}")

    def on_toggle_complete(self):
        idx = self.selected_index("toggle complete")
        if idx == -1: return
        task = self.store.toggle_complete(idx)
        self.show_status(f"{'Completed' if task.completed else 'Reopened'}: {task.text}")

    def on_clear_completed(self):
        removed = self.store.clear_completed()
        if not removed:
            self.inform("Info", "No completed tasks to clear.")
            return
        self.show_status(f"Cleared {removed} completed task(s)")

    def on_undo(self):
        task = self.store.undo()
        if task is None:
            self.inform("Info", "Nothing to undo.")
            return
        self.show_status(f"Restored: {task.text}")

    # --- 持久化 ---
    def load_tasks(self):
        try:
            tasks = self.storage.load_tasks()
        except (TaskFileError, OSError):
            logger.exception("Could not load tasks from %s", self.storage.path)
            tasks = []
        self.store.load(tasks)

    def save_tasks(self) -> bool:
        # 始终保存完整的 store，与当前筛选无关
        try:
            self.storage.save_tasks(self.store)
        except OSError:
            logger.exception("Could not save tasks to %s", self.storage.path)
            return False
        return True

    def closeEvent(self, event):
        if self.editor is not None:
            self.editor.finalize()
        self.save_tasks()
        super().closeEvent(event)


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    if sys.platform == "linux": os.environ.setdefault("QT_QPA_PLATFORM", "xcb")
    app = QApplication(sys.argv if argv is None else argv)
    window = TaskManagerWindow(TaskStore(), TaskStorage())
    window.load_tasks()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
