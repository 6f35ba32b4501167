from PySide6.QtWidgets import QWidget


class Page(QWidget):
    """A screen shown by the stack panel.

    init_logic() runs once when the page is first shown and deinit_logic()
    when it is removed from the stack.
    """

    def __init__(self, title: str, parent=None):
        super().__init__(parent)
        self.title = title
        self.logic_initialized = False

    def get_title(self):
        return self.title

    def init_ui(self):
        raise NotImplementedError

    def init_logic(self):
        raise NotImplementedError

    def deinit_logic(self):
        raise NotImplementedError

    def page_visible(self):
        if not self.logic_initialized:
            self.logic_initialized = True
            self.init_logic()

    def page_removed(self):
        if self.logic_initialized:
            self.logic_initialized = False
            self.deinit_logic()
