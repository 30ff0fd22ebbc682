"""Shared fixtures for the to-do tests."""
from datetime import date
from pathlib import Path

import pytest

from todolist.manager import TaskManager
from todolist.models import Task
from todolist.theme import Theme


@pytest.fixture()
def manager() -> TaskManager:
    return TaskManager()


@pytest.fixture()
def work(manager: TaskManager) -> TaskManager:
    """Manager holding one 'Work' category with tasks A, B, C in that order."""
    manager.add_category("Work")
    for i, name in enumerate("ABC", start=1):
        manager.add_task("Work", Task(name, date(2024, 1, i)))
    return manager


@pytest.fixture()
def plain_theme(tmp_path: Path) -> Theme:
    """Colors disabled, no .env file."""
    return Theme(environ={}, env_file=tmp_path / ".env", isatty=False)
