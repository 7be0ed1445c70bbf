# src/todolist/__init__.py

"""Single-user command-line task list backed by a plain-text file."""

__version__ = "0.1.0"
