"""Tests for theme resolution and listing rendering."""
from datetime import date

from todolist.display import render_categories, render_task, render_tasks
from todolist.models import TaskRow
from todolist.theme import HEX_IMPORTANT_DEFAULT, Theme, read_env_file


def test_plain_rendering(work, plain_theme):
    work.add_category("Home")
    work.highlight_task("Work", 1)
    lines = render_tasks(work.list_all_tasks(), plain_theme)
    assert lines == [
        "",
        "Category: Work",
        "1. A (Due: 2024-01-01)",
        "2. B (Due: 2024-01-02)",
        "3. C (Due: 2024-01-03)",
        "",
        "Category: Home",
        "(empty)",
    ]


def test_no_categories(plain_theme):
    assert render_tasks([], plain_theme) == ["No categories yet."]
    assert render_categories([], plain_theme) == ["", "Categories:", "  (none)", ""]


def test_category_names(plain_theme):
    assert render_categories(["Work", "Home"], plain_theme) == ["", "Categories:", "- Work", "- Home", ""]


def test_important_task_is_colored(tmp_path):
    theme = Theme(environ={"FORCE_COLOR": "1", "COLORTERM": "truecolor"},
                  env_file=tmp_path / ".env", isatty=False)
    assert theme.enabled and theme.truecolor
    important = render_task(TaskRow(1, "Pay rent", date(2024, 1, 1), True), theme)
    normal = render_task(TaskRow(2, "Pay rent", date(2024, 1, 1), False), theme)
    assert "\033[38;2;229;72;77m" in important
    assert "\033[38;2;229;72;77m" not in normal
    assert important.endswith(theme.reset)


def test_no_color_wins_over_force(tmp_path):
    theme = Theme(environ={"FORCE_COLOR": "1", "NO_COLOR": ""}, env_file=tmp_path / ".env", isatty=True)
    assert not theme.enabled
    assert theme.color("x", theme.important) == "x"


def test_256_color_fallback(tmp_path):
    theme = Theme(environ={}, env_file=tmp_path / ".env", isatty=True)
    assert theme.enabled and not theme.truecolor
    assert theme.important.startswith("\033[38;5;")


def test_palette_priority(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# palette\n"
        "TODO_IMPORTANT=#00FF00\n"
        "TODO_MUTED=123456\n"
        "TODO_PRIMARY=nothex\n"
        "OTHER=#FFFFFF\n"
    )
    assert read_env_file(env_file) == {"TODO_IMPORTANT": "#00FF00", "TODO_MUTED": "#123456"}

    theme = Theme(environ={"TODO_MUTED": "#ABCDEF"}, env_file=env_file, isatty=False)
    assert theme.hex_important == "#00FF00"
    assert theme.hex_muted == "#ABCDEF"
    assert theme.hex_primary == "#476EAE"


def test_undecodable_env_file_is_ignored(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_bytes(b"TODO_IMPORTANT=\xff\xfe#00FF00\n")
    assert read_env_file(env_file) == {}
    theme = Theme(environ={}, env_file=env_file, isatty=False)
    assert theme.hex_important == HEX_IMPORTANT_DEFAULT


def test_missing_env_file_uses_defaults(tmp_path):
    theme = Theme(environ={"TODO_IMPORTANT": "bogus"}, env_file=tmp_path / "absent", isatty=False)
    assert theme.hex_important == HEX_IMPORTANT_DEFAULT
