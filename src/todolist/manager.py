"""TaskManager: owns every category and exposes all mutations and queries.

Operations return the success message the shell prints verbatim; failures
raise a TodoError subclass whose text is the failure message. Category order
is insertion order.
"""
import logging
from typing import Dict, List, Tuple
from todolist.errors import CategoryNotFound, DuplicateCategory, IndexOutOfRange
from todolist.models import Category, Task, TaskRow

logger = logging.getLogger(__name__)

Listing = List[Tuple[str, List[TaskRow]]]


class TaskManager:
    def __init__(self) -> None:
        self.categories: Dict[str, Category] = {}

    # -------------------- lookup --------------------
    def get_category(self, name: str) -> Category:
        try:
            return self.categories[name]
        except KeyError:
            logger.info("unknown category %r", name)
            raise CategoryNotFound(name) from None

    # -------------------- categories --------------------
    def add_category(self, name: str) -> str:
        if name in self.categories:
            logger.info("rejected duplicate category %r", name)
            raise DuplicateCategory(name)
        self.categories[name] = Category(name)
        logger.debug("added category %r", name)
        return f"Category '{name}' added successfully."

    def delete_category(self, name: str) -> str:
        category = self.get_category(name)
        del self.categories[name]
        logger.debug("deleted category %r with %d task(s)", name, len(category))
        return f"Category '{name}' deleted successfully."

    # -------------------- queries --------------------
    def list_category_names(self) -> List[str]:
        return list(self.categories)

    def list_all_tasks(self) -> Listing:
        """Each category name with its tasks as numbered rows (numbers start at 1)."""
        return [
            (name, [TaskRow.from_task(i, t) for i, t in enumerate(category, start=1)])
            for name, category in self.categories.items()
        ]

    # -------------------- task operations --------------------
    def add_task(self, category_name: str, task: Task) -> str:
        category = self.get_category(category_name)
        category.add(task)
        logger.debug("added task %r to %r", task.description, category_name)
        return "Task added successfully."

    def delete_task(self, category_name: str, index: int) -> str:
        task = self._apply(category_name, lambda c: c.remove(index))
        logger.debug("deleted task %r from %r", task.description, category_name)
        return "Task deleted successfully."

    def move_task_within_category(self, category_name: str, from_index: int, to_index: int) -> str:
        self._apply(category_name, lambda c: c.move(from_index, to_index))
        logger.debug("moved task %d -> %d in %r", from_index, to_index, category_name)
        return "Task moved successfully."

    def move_task_between_categories(self, source_name: str, index: int, destination_name: str) -> str:
        """Move one task to the end of another category.

        Both categories must exist and ``index`` must be valid for the source
        before either category is touched, so a failure never loses a task.
        """
        if source_name not in self.categories or destination_name not in self.categories:
            missing = source_name if source_name not in self.categories else destination_name
            logger.info("move between %r and %r rejected: %r missing",
                        source_name, destination_name, missing)
            raise CategoryNotFound(missing, "One or both categories do not exist.")
        task = self._apply(source_name, lambda c: c.remove(index))
        self.categories[destination_name].add(task)
        logger.debug("moved task %r from %r to %r", task.description, source_name, destination_name)
        return "Task moved successfully."

    def highlight_task(self, category_name: str, index: int) -> str:
        task = self._apply(category_name, lambda c: c.get(index))
        task.highlight()
        logger.debug("highlighted task %r in %r", task.description, category_name)
        return "Task highlighted successfully."

    # -------------------- helpers --------------------
    def _apply(self, category_name, action):
        """Run ``action`` on the named category, logging bounds failures."""
        category = self.get_category(category_name)
        try:
            return action(category)
        except IndexOutOfRange as exc:
            logger.info("index %d out of range for %r (size %d)", exc.index, category_name, exc.size)
            raise
