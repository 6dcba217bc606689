# src/thematic/reporting.py

"""
Console view of a rule list.

Use:
    from thematic.reporting import print_rules
    print_rules(synthesis.rules)
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .rules import Rule

__all__ = ["rules_table", "print_rules"]


def _swatch(rule: Rule) -> Text:
    """Colored block plus hex code, or a dash for unstyled rules."""
    style = rule.style
    if style is None:
        return Text("-", style="dim")
    hexcode = style.color.hex
    out = Text("██ ", style=hexcode)
    out.append(hexcode)
    return out


def rules_table(rules: Sequence[Rule], *, title: str = "Classification rules") -> Table:
    """
    Rich table with one row per rule: index, title, CQL filter, color.
    """
    t = Table(title=title, box=box.SIMPLE_HEAVY)
    t.add_column("#", justify="right")
    t.add_column("Title")
    t.add_column("Filter (CQL)", overflow="fold")
    t.add_column("Color")
    for i, r in enumerate(rules):
        t.add_row(str(i), r.title, r.to_cql(), _swatch(r))
    return t


def print_rules(rules: Sequence[Rule], console: Optional[Console] = None, *, title: str = "Classification rules") -> None:
    console = console or Console()
    console.print(rules_table(rules, title=title))
