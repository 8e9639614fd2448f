"""
Input collection for the interactive menu.

Reads raw lines through `typer.prompt` and assembles them into a RecordFields
value object or a bare identifier string. Both collectors accept injectable
`prompt`/`echo` callables so they can be driven without a terminal.
"""

from __future__ import annotations

from typing import Callable

import typer

from sales_crud.domain.models import RecordFields
from sales_crud.utils.logging import get_logger

log = get_logger(__name__)

PromptFn = Callable[[str], str]
EchoFn = Callable[[str], None]


def prompt_line(text: str) -> str:
    """Read one line; an empty answer is accepted as an empty string."""
    return typer.prompt(text, default="", show_default=False)


def collect_record_fields(
    prompt: PromptFn = prompt_line,
    echo: EchoFn = typer.echo,
) -> RecordFields:
    """
    Prompt for the editable record fields.

    A revenue that does not parse as a float is reported and replaced with 0.0;
    the user is not asked again.
    """
    name = prompt("Insert the name")
    raw_revenue = prompt("Insert the revenue value")
    try:
        revenue = float(raw_revenue)
    except ValueError as exc:
        echo(f"Error parsing revenue: {exc}")
        log.info("Revenue defaulted to 0", extra={"raw_revenue": raw_revenue})
        revenue = 0.0
    return RecordFields(name=name, revenue=revenue)


def collect_record_id(prompt: PromptFn = prompt_line) -> str:
    """Prompt for a record identifier; only surrounding whitespace is removed."""
    return prompt("What is the record ID?").strip()


__all__ = ["collect_record_fields", "collect_record_id", "prompt_line"]
