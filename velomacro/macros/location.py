"""Location strings for macro diagnostics."""

from __future__ import annotations

from typing import NamedTuple, Optional

UNKNOWN_TEMPLATE = "<unknown template>"


def format_location(
    template_name: Optional[str],
    line: Optional[int] = None,
    column: Optional[int] = None,
) -> str:
    """Return ``"Name.vm[line 3, column 7]"``, or just the template name when
    the position is not known."""
    name = template_name or UNKNOWN_TEMPLATE
    if line is None:
        return name
    return f"{name}[line {line}, column {column or 0}]"


class Location(NamedTuple):
    """A call-site position, formatted only when a diagnostic reads it.

    Logging with ``%s`` defers the formatting until the record is emitted.
    """
    template_name: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        return format_location(self.template_name, self.line, self.column)
