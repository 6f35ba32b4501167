"""
Task list page.

Pure presentation: renders the controller's visible tasks and forwards
user input to it.
"""

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (QButtonGroup, QHBoxLayout, QLabel, QLineEdit, QPushButton,
                               QScrollArea, QVBoxLayout, QWidget)

from todolist.gui import config
from todolist.gui.logic.services.models import TaskFilter
from todolist.gui.logic.task_manager.task_list_controller import TaskListController
from todolist.gui.ui.pages.page import Page

from .task_row import TaskRow

logger = logging.getLogger(__name__)

FILTER_LABELS = [
    (TaskFilter.ALL, config.FILTER_ALL_LABEL),
    (TaskFilter.COMPLETED, config.FILTER_COMPLETED_LABEL),
    (TaskFilter.INCOMPLETE, config.FILTER_INCOMPLETE_LABEL),
]


class TaskListPage(Page):
    """Lists tasks with an input for new ones and a status filter."""

    def __init__(self, controller: TaskListController, parent=None):
        super().__init__(config.ROUTE_TASK_LIST, parent)
        self.controller = controller
        self.rows = []
        self.filter_buttons = {}
        self.init_ui()
        self.connect_controller_signals()

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.header_label = QLabel(config.TASK_LIST_HEADER)
        self.header_label.setObjectName("pageHeader")
        layout.addWidget(self.header_label)

        input_layout = QHBoxLayout()
        self.task_input = QLineEdit()
        self.task_input.setPlaceholderText(config.NEW_TASK_PLACEHOLDER)
        self.task_input.textChanged.connect(self.controller.set_input_text)
        self.task_input.returnPressed.connect(self.controller.create_task)
        input_layout.addWidget(self.task_input, 1)

        self.add_button = QPushButton(config.ADD_TASK_LABEL)
        self.add_button.setObjectName("addTaskButton")
        self.add_button.clicked.connect(self.on_add_clicked)
        input_layout.addWidget(self.add_button)
        layout.addLayout(input_layout)

        filter_layout = QHBoxLayout()
        self.filter_group = QButtonGroup(self)
        self.filter_group.setExclusive(True)
        for task_filter, label in FILTER_LABELS:
            button = QPushButton(label)
            button.setObjectName("filterButton")
            button.setCheckable(True)
            button.setChecked(task_filter is self.controller.active_filter)
            button.clicked.connect(lambda checked=False, f=task_filter: self.controller.set_filter(f))
            self.filter_group.addButton(button)
            self.filter_buttons[task_filter] = button
            filter_layout.addWidget(button)
        layout.addLayout(filter_layout)

        self.list_container = QWidget()
        self.list_layout = QVBoxLayout(self.list_container)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.setSpacing(0)
        self.list_layout.addStretch(1)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.scroll_area.setWidget(self.list_container)
        layout.addWidget(self.scroll_area, 1)

    def connect_controller_signals(self):
        self.controller.tasks_changed.connect(self.render_tasks)
        self.controller.filter_changed.connect(self.on_filter_changed)
        self.controller.input_text_changed.connect(self.on_input_text_changed)

    def init_logic(self):
        logger.debug("Task list page mounted")
        self.controller.initialize()

    def deinit_logic(self):
        logger.debug("Task list page unmounted")
        self.controller.shutdown()

    def on_add_clicked(self):
        self.controller.create_task()

    def on_input_text_changed(self, text):
        if self.task_input.text() != text:
            self.task_input.setText(text)

    def on_filter_changed(self, task_filter):
        self.filter_buttons[task_filter].setChecked(True)
        self.render_tasks()

    def render_tasks(self, *args):
        for row in self.rows:
            self.list_layout.removeWidget(row)
            row.deleteLater()
        self.rows = []

        for index, task in enumerate(self.controller.visible_tasks()):
            row = TaskRow(task)
            row.toggle_requested.connect(self.controller.toggle_done)
            row.open_requested.connect(self.controller.open_task)
            row.delete_requested.connect(self.controller.delete_task)
            self.list_layout.insertWidget(index, row)
            self.rows.append(row)
