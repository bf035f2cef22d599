from __future__ import annotations

from enum import Enum

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from optset.option_set import OptionSet

__all__ = ["Colors", "option_table", "print_option_set"]


class Colors(Enum):
    SET = "green"
    UNSET = "red"
    PRIMARY = "#87AFA3"
    SECONDARY = "#B5A46D"


def _flag(value: bool) -> Text:
    if value:
        return Text("yes", style=Colors.SET.value)
    return Text("no", style=Colors.UNSET.value)


def option_table(option_set: OptionSet, *, title: str | None = None) -> Table:
    """Build a table with one row per member of the option set's enumeration."""
    table = Table(
        title=title or option_set.option_type.__name__,
        box=box.ASCII_DOUBLE_HEAD,
        title_style=f"bold {Colors.PRIMARY.value}",
        title_justify="left",
    )
    table.add_column("option", style=f"bold {Colors.SECONDARY.value}")
    table.add_column("acronym")
    table.add_column("long name", overflow="fold")
    table.add_column("set", justify="center")
    table.add_column("acronym preferred", justify="center")

    for option in option_set.option_type:
        table.add_row(
            option.name,
            option.acronym,
            option.long_name,
            _flag(option_set.is_set(option)),
            _flag(option_set.use_acronym_for(option)),
        )

    return table


def print_option_set(
    option_set: OptionSet,
    *,
    console: Console | None = None,
    title: str | None = None,
) -> None:
    console = console or Console()
    console.print(option_table(option_set, title=title))
