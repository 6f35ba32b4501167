from todolist.gui import config

APP_STYLESHEET = f"""
QWidget {{
    background-color: {config.BACKGROUND_COLOR};
    color: {config.TEXT_COLOR};
    font-size: 14px;
}}

#headerBar {{
    background-color: {config.PRIMARY_COLOR};
}}

#headerBar QLabel, #headerBar QPushButton {{
    background-color: transparent;
    color: white;
    font-weight: bold;
    border: none;
}}

#pageHeader {{
    font-size: 24px;
    font-weight: bold;
    padding-bottom: 10px;
}}

QLineEdit, QPlainTextEdit {{
    border: 1px solid {config.BORDER_COLOR};
    border-radius: 5px;
    padding: 8px;
}}

#addTaskButton, #updateTaskButton {{
    background-color: {config.PRIMARY_COLOR};
    color: white;
    border: none;
    border-radius: 5px;
    padding: 8px 14px;
    font-weight: bold;
}}

#filterButton {{
    border: 1px solid {config.PRIMARY_COLOR};
    border-radius: 5px;
    padding: 6px 10px;
}}

#filterButton:checked {{
    background-color: {config.PRIMARY_COLOR};
    color: white;
}}

#taskRow {{
    border-bottom: 1px solid {config.BORDER_COLOR};
}}

#taskIndicator {{
    border: 2px solid {config.BORDER_COLOR};
    border-radius: 10px;
    min-width: 16px;
    max-width: 16px;
    min-height: 16px;
    max-height: 16px;
}}

#taskIndicator[done="true"] {{
    background-color: {config.DONE_COLOR};
    border-color: {config.DONE_COLOR};
}}

#taskLabel {{
    border: none;
    text-align: left;
}}

#taskLabel[done="true"] {{
    color: {config.DONE_TEXT_COLOR};
}}

#deleteTaskButton {{
    border: none;
    color: {config.DELETE_COLOR};
}}
"""
