"""Errors raised by the to-do core.

Every error is recoverable: the shell prints ``str(exc)`` and keeps looping.
"""


class TodoError(Exception):
    """Base class for all reported (non-fatal) failures."""


class DuplicateCategory(TodoError):
    def __init__(self, name: str):
        super().__init__(f"Category '{name}' already exists.")
        self.name = name


class CategoryNotFound(TodoError):
    def __init__(self, name: str, message: str = ''):
        super().__init__(message or f"Category '{name}' does not exist.")
        self.name = name


class IndexOutOfRange(TodoError):
    def __init__(self, index: int, size: int, message: str = 'Invalid task number.'):
        super().__init__(message)
        self.index = index
        self.size = size
