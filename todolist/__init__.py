"""Todolist: a single-list task manager backed by a live document store."""

__version__ = "0.1.0"
