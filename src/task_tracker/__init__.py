"""task-tracker: a small command-line task list stored in a JSON file."""

__version__ = "0.1.0"
