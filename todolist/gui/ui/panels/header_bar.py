from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QLabel, QPushButton, QWidget

from todolist.gui import config


class HeaderBar(QWidget):
    """Shows the current screen title and a back control when there is somewhere to go back to."""

    back_requested = Signal()

    def __init__(self, parent=None):
        super(HeaderBar, self).__init__(parent)
        self.setObjectName("headerBar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setFixedHeight(44)

        self.bar_layout = QGridLayout()
        self.bar_layout.setContentsMargins(8, 4, 8, 4)
        self.bar_layout.setSpacing(4)
        self.bar_layout.setColumnStretch(1, 1)

        self.back_button = QPushButton(config.BACK_LABEL)
        self.back_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.back_button.clicked.connect(self.on_back_clicked)
        self.back_button.setVisible(False)
        self.bar_layout.addWidget(self.back_button, 0, 0, alignment=Qt.AlignmentFlag.AlignLeft)

        self.title_label = QLabel()
        self.bar_layout.addWidget(self.title_label, 0, 1, alignment=Qt.AlignmentFlag.AlignCenter)

        self.setLayout(self.bar_layout)

    def on_back_clicked(self):
        self.back_requested.emit()

    def set_route(self, title: str, can_go_back: bool):
        self.title_label.setText(title)
        self.back_button.setVisible(can_go_back)
