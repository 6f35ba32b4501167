APP_NAME = 'Todo List'
APP_VERSION = '0.1.0'
DEV_NAME = 'todolist'

# Routes
ROUTE_TASK_LIST = 'Task List'
ROUTE_EDIT_TASK = 'EditTask'

# Task list screen
TASK_LIST_HEADER = 'Manage Your Tasks'
NEW_TASK_PLACEHOLDER = 'Add a new task'
ADD_TASK_LABEL = '+'
FILTER_ALL_LABEL = 'All Tasks'
FILTER_COMPLETED_LABEL = 'Completed'
FILTER_INCOMPLETE_LABEL = 'Incomplete'
EMPTY_TASK_TEXT = 'No task text'
DELETE_TASK_LABEL = 'Delete'

# Edit task screen
EDIT_TITLE_PLACEHOLDER = 'Edit your task title'
EDIT_DESCRIPTION_PLACEHOLDER = 'Edit your task description'
UPDATE_TASK_LABEL = 'Update'

BACK_LABEL = '< Back'

# Colors
PRIMARY_COLOR = '#173753'
BORDER_COLOR = '#ccc'
DONE_COLOR = '#008000'
DONE_TEXT_COLOR = '#888'
DELETE_COLOR = 'red'
TEXT_COLOR = '#000'
BACKGROUND_COLOR = '#fff'

WINDOW_MIN_WIDTH = 420
WINDOW_MIN_HEIGHT = 640
