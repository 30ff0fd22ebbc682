"""Interactive menu loop for the to-do list.

Numbers typed by the user are 1-based; they are converted to the 0-based
indices TaskManager works with before each call.
"""
import sys
from typing import Callable, Dict, Optional
import click
from todolist.display import render_categories, render_tasks
from todolist.errors import TodoError
from todolist.manager import TaskManager
from todolist.models import Task
from todolist.theme import Theme

DATE_TYPE = click.DateTime(formats=['%Y-%m-%d'])

MENU = (
    ('1', 'Add Category'),
    ('2', 'Delete Category'),
    ('3', 'Display Tasks'),
    ('4', 'Add Task'),
    ('5', 'Delete Task'),
    ('6', 'Move Task Within Category'),
    ('7', 'Move Task Between Categories'),
    ('8', 'Highlight Task'),
    ('q', 'Quit'),
)


def _enter_alt_screen() -> None:
    click.echo("\033[?1049h", nl=False)


def _leave_alt_screen() -> None:
    click.echo("\033[?1049l", nl=False)


def _is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def _pause() -> None:
    """Wait for one key; Ctrl-C and EOF propagate so the loop can exit."""
    if not _is_interactive():
        return
    click.echo("Press any key to continue...", nl=False)
    click.getchar()
    click.echo()


def _prompt_number(text: str) -> int:
    """Prompt for a 1-based task number and return the 0-based index."""
    return click.prompt(text, type=int) - 1


class CLI:
    def __init__(self, manager: TaskManager, theme: Optional[Theme] = None, alt_screen: bool = True):
        self.manager: TaskManager = manager
        self.theme: Theme = theme or Theme()
        self.alt_screen: bool = alt_screen
        self.actions: Dict[str, Callable[[], Optional[str]]] = {
            '1': self._add_category,
            '2': self._delete_category,
            '3': self._display_tasks,
            '4': self._add_task,
            '5': self._delete_task,
            '6': self._move_within,
            '7': self._move_between,
            '8': self._highlight,
        }

    def run(self) -> None:
        """Main loop: clear, list categories, show menu, dispatch, pause."""
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                click.clear()
                self._echo_lines(render_categories(self.manager.list_category_names(), self.theme))
                choice = self._menu()
                if choice == 'q':
                    exit_message = "Goodbye."
                    break
                self.handle(choice)
                _pause()
        except (click.Abort, KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            if exit_message:
                click.echo(exit_message)

    def handle(self, choice: str) -> None:
        """Run one menu action and print its outcome; core errors never end the loop."""
        action = self.actions.get(choice)
        if action is None:
            click.echo("Unknown option. Choose 1-8 or q.")
            return
        try:
            message = action()
        except TodoError as exc:
            click.echo(str(exc))
            return
        if message:
            click.echo(message)

    # -------------------- menu --------------------
    def _menu(self) -> str:
        for key, label in MENU:
            click.echo(f"{key}. {label}")
        return click.prompt("Choose an option", default='', show_default=False).strip().lower()

    def _echo_lines(self, lines) -> None:
        for line in lines:
            click.echo(line)

    # -------------------- actions --------------------
    def _add_category(self) -> str:
        name = click.prompt("Enter the new category name")
        return self.manager.add_category(name)

    def _delete_category(self) -> str:
        name = click.prompt("Enter the category name to delete")
        return self.manager.delete_category(name)

    def _display_tasks(self) -> None:
        self._echo_lines(render_tasks(self.manager.list_all_tasks(), self.theme))

    def _add_task(self) -> str:
        category = click.prompt("Enter the category name")
        description = click.prompt("Describe your task")
        due = click.prompt("Enter the due date (yyyy-mm-dd)", type=DATE_TYPE)
        return self.manager.add_task(category, Task(description, due.date()))

    def _delete_task(self) -> str:
        category = click.prompt("Enter the category name")
        index = _prompt_number("Enter the task number to delete")
        return self.manager.delete_task(category, index)

    def _move_within(self) -> str:
        category = click.prompt("Enter the category name")
        index = _prompt_number("Enter the task number to move")
        position = _prompt_number("Enter the new position")
        return self.manager.move_task_within_category(category, index, position)

    def _move_between(self) -> str:
        source = click.prompt("Enter the source category name")
        index = _prompt_number("Enter the task number to move")
        destination = click.prompt("Enter the destination category name")
        return self.manager.move_task_between_categories(source, index, destination)

    def _highlight(self) -> str:
        category = click.prompt("Enter the category name")
        index = _prompt_number("Enter the task number to highlight")
        return self.manager.highlight_task(category, index)
