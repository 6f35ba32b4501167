from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from todolist.gui import config
from todolist.gui.logic.services.models import Task


class TaskRow(QWidget):
    """One task: completion indicator, clickable title and delete control."""

    toggle_requested = Signal(str, bool)  # task_id, done as displayed
    open_requested = Signal(object)  # Task
    delete_requested = Signal(str)  # task_id

    def __init__(self, task: Task, parent=None):
        super().__init__(parent)
        self.task = task
        self.setObjectName("taskRow")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.init_ui()

    def init_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 8, 4, 8)
        layout.setSpacing(10)

        self.indicator = QPushButton()
        self.indicator.setObjectName("taskIndicator")
        self.indicator.setProperty("done", self.task.done)
        self.indicator.setCursor(Qt.CursorShape.PointingHandCursor)
        self.indicator.clicked.connect(self.on_indicator_clicked)
        layout.addWidget(self.indicator)

        self.label = QPushButton(self.task.text or config.EMPTY_TASK_TEXT)
        self.label.setObjectName("taskLabel")
        self.label.setProperty("done", self.task.done)
        self.label.setFlat(True)
        self.label.setCursor(Qt.CursorShape.PointingHandCursor)
        font = self.label.font()
        font.setStrikeOut(self.task.done)
        self.label.setFont(font)
        self.label.clicked.connect(self.on_label_clicked)
        layout.addWidget(self.label, 1)

        self.delete_button = QPushButton(config.DELETE_TASK_LABEL)
        self.delete_button.setObjectName("deleteTaskButton")
        self.delete_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.delete_button.clicked.connect(self.on_delete_clicked)
        layout.addWidget(self.delete_button)

    def on_indicator_clicked(self):
        self.toggle_requested.emit(self.task.id, self.task.done)

    def on_label_clicked(self):
        self.open_requested.emit(self.task)

    def on_delete_clicked(self):
        self.delete_requested.emit(self.task.id)
