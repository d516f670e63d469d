from PyQt6.QtWidgets import QLineEdit
from PyQt6.QtCore import Qt

from constants import PANEL_COLOR, ACCENT_COLOR


class InlineEditor(QLineEdit):
    """Line edit laid over a list row; Enter or focus loss commits, Esc cancels"""

    def __init__(self, parent, rect, text, callback):
        super().__init__(parent)
        self.callback = callback
        self.finalized = False
        self.setGeometry(rect)
        self.setText(text)
        self.selectAll()
        self.setStyleSheet(f"""
            QLineEdit {{
                background: {PANEL_COLOR};
                color: white;
                border: 2px solid {ACCENT_COLOR};
                padding: 2px;
            }}
        """)
        self.setFocus()
        self.returnPressed.connect(self.finalize)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Escape:
            self.cancel()
        else:
            super().keyPressEvent(event)

    def cancel(self):
        if self.finalized: return
        self.finalized = True
        self.deleteLater()

    def finalize(self):
        if self.finalized: return
        self.finalized = True

        # 空文本也回调，由调用方决定提示
        self.callback(self.text().strip())

        self.deleteLater()

    def focusOutEvent(self, event):
        # 失去焦点时自动提交
        self.finalize()
        super().focusOutEvent(event)
