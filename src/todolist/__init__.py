"""Console to-do list manager: categories holding ordered tasks."""
from todolist.errors import TodoError, DuplicateCategory, CategoryNotFound, IndexOutOfRange
from todolist.models import Task, Category, TaskRow
from todolist.manager import TaskManager

__all__ = [
    'TodoError', 'DuplicateCategory', 'CategoryNotFound', 'IndexOutOfRange',
    'Task', 'Category', 'TaskRow', 'TaskManager',
]
