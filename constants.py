DATA_FILE_NAME = "tasks.txt"

WINDOW_TITLE = "Smart Task Manager"
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 480
BUTTON_WIDTH = 140
BUTTON_HEIGHT = 30

FILTER_LABELS = ("All", "Pending", "Completed")

BG_COLOR = "#1F2329"
PANEL_COLOR = "#2A3039"
BORDER_COLOR = "#3A4049"
ACCENT_COLOR = "#4A90E2"
DONE_COLOR = "#888888"
CHECK_MARK = "✓"
