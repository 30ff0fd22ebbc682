"""Data models for the to-do list: Task, Category and the TaskRow listing record.

Indices are 0-based here; the shell converts the 1-based numbers users type.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, List
from todolist.errors import IndexOutOfRange


def due_label(description: str, due_date: date) -> str:
    return f"{description} (Due: {due_date.isoformat()})"


@dataclass
class Task:
    """A single to-do item.

    Fields:
        description: Free text, set at creation.
        due_date: Calendar date the task is due.
        important: Highlight flag; the only field toggled after creation.
    """
    description: str
    due_date: date
    important: bool = False

    def highlight(self) -> None:
        self.important = True

    def __str__(self) -> str:
        return due_label(self.description, self.due_date)


@dataclass
class Category:
    """A named, ordered list of tasks. Order is display and indexing order."""
    name: str
    tasks: List[Task] = field(default_factory=list)

    def add(self, task: Task) -> None:
        self.tasks.append(task)

    def get(self, index: int) -> Task:
        self._check(index)
        return self.tasks[index]

    def remove(self, index: int) -> Task:
        self._check(index)
        return self.tasks.pop(index)

    def move(self, from_index: int, to_index: int) -> None:
        """Delete-then-insert; the other tasks keep their relative order."""
        if not (self._in_bounds(from_index) and self._in_bounds(to_index)):
            bad = to_index if self._in_bounds(from_index) else from_index
            raise IndexOutOfRange(bad, len(self.tasks), 'Invalid task number or position.')
        if from_index == to_index:
            return
        task = self.tasks.pop(from_index)
        self.tasks.insert(to_index, task)

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self.tasks)

    def _check(self, index: int) -> None:
        if not self._in_bounds(index):
            raise IndexOutOfRange(index, len(self.tasks))

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class TaskRow:
    """Listing record for one task; rendering of ``important`` is up to the caller."""
    number: int
    description: str
    due_date: date
    important: bool

    @classmethod
    def from_task(cls, number: int, task: Task) -> TaskRow:
        return cls(number, task.description, task.due_date, task.important)

    @property
    def label(self) -> str:
        return due_label(self.description, self.due_date)
