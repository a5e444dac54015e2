"""Default values used across the project."""

# Environment variable prefix for Settings
ENV_PREFIX = "TICKLIST_"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DATE_FORMAT = "%Y-%m-%d"

# Interactive menu: (choice, label)
MENU_CHOICES: list[tuple[str, str]] = [
    ("1", "Add a new todo"),
    ("2", "List all todos"),
    ("3", "List incomplete todos"),
    ("4", "List completed todos"),
    ("5", "Mark a todo as completed"),
    ("6", "Update a todo"),
    ("7", "Remove a todo"),
    ("8", "Clear all completed todos"),
    ("0", "Exit application"),
]

UPDATE_CHOICES: list[tuple[str, str]] = [
    ("1", "Task description"),
    ("2", "Due date"),
    ("0", "Cancel"),
]
