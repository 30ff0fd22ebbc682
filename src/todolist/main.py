"""Main entry point for the to-do list shell."""
import logging
import click
from todolist.cli import CLI
from todolist.logging_setup import setup_logging
from todolist.manager import TaskManager
from todolist.theme import Theme

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


@click.command()
@click.option('--alt-screen/--no-alt-screen', envvar='TODO_ALT_SCREEN', default=True,
              help='Draw the menu on the terminal alternate screen.')
@click.option('--log-level', envvar='TODO_LOG_LEVEL', default='WARNING',
              type=click.Choice(LOG_LEVELS, case_sensitive=False), help='Console log level.')
@click.option('--log-file', envvar='TODO_LOG_FILE', type=click.Path(dir_okay=False),
              default=None, help='Also write DEBUG logs to this file.')
def main(alt_screen: bool, log_level: str, log_file) -> None:
    """Manage categories of to-do tasks from the console. Nothing is saved on exit."""
    setup_logging(level=log_level, log_file=log_file)
    logging.getLogger(__name__).debug("starting, alt_screen=%s", alt_screen)
    CLI(TaskManager(), Theme(), alt_screen=alt_screen).run()


if __name__ == "__main__":
    main()
