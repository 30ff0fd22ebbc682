"""Rendering of category names and task listings into printable lines.

Presentation only: reads listings produced by TaskManager and never mutates.
"""
from typing import Iterable, List, Sequence
from todolist.manager import Listing
from todolist.models import TaskRow
from todolist.theme import Theme


def render_categories(names: Sequence[str], theme: Theme) -> List[str]:
    lines = ['', theme.color('Categories:', theme.header)]
    if not names:
        lines.append(theme.color('  (none)', theme.empty))
    lines.extend(f'- {name}' for name in names)
    lines.append('')
    return lines


def render_task(row: TaskRow, theme: Theme) -> str:
    body = row.label
    if row.important:
        body = theme.color(body, theme.important)
    return theme.color(f'{row.number}.', theme.number) + ' ' + body


def render_tasks(listing: Listing, theme: Theme) -> List[str]:
    """One header per category followed by its numbered tasks."""
    if not listing:
        return [theme.color('No categories yet.', theme.empty)]
    lines: List[str] = []
    for name, rows in listing:
        lines.append('')
        lines.append(theme.color(f'Category: {name}', theme.header))
        lines.extend(_task_lines(rows, theme))
    return lines


def _task_lines(rows: Iterable[TaskRow], theme: Theme) -> List[str]:
    out = [render_task(row, theme) for row in rows]
    return out or [theme.color('(empty)', theme.empty)]
