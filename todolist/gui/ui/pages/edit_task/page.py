import logging

from PySide6.QtWidgets import QLineEdit, QPlainTextEdit, QPushButton, QVBoxLayout

from todolist.gui import config
from todolist.gui.logic.task_manager.edit_task_controller import EditTaskController
from todolist.gui.ui.pages.page import Page

logger = logging.getLogger(__name__)


class EditTaskPage(Page):
    """Edits one task's title and description."""

    def __init__(self, controller: EditTaskController, parent=None):
        super().__init__(config.ROUTE_EDIT_TASK, parent)
        self.controller = controller
        self.init_ui()

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.title_input = QLineEdit(self.controller.text)
        self.title_input.setPlaceholderText(config.EDIT_TITLE_PLACEHOLDER)
        self.title_input.textChanged.connect(self.controller.set_text)
        layout.addWidget(self.title_input)

        self.description_input = QPlainTextEdit(self.controller.description)
        self.description_input.setPlaceholderText(config.EDIT_DESCRIPTION_PLACEHOLDER)
        self.description_input.textChanged.connect(self.on_description_edited)
        layout.addWidget(self.description_input, 1)

        self.update_button = QPushButton(config.UPDATE_TASK_LABEL)
        self.update_button.setObjectName("updateTaskButton")
        self.update_button.clicked.connect(self.on_update_clicked)
        layout.addWidget(self.update_button)

    def init_logic(self):
        logger.debug(f"Editing task {self.controller.params.task_id}")
        self.controller.initialize()

    def deinit_logic(self):
        self.controller.shutdown()

    def on_description_edited(self):
        self.controller.set_description(self.description_input.toPlainText())

    def on_update_clicked(self):
        self.controller.update_task()
