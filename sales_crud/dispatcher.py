"""
Menu dispatcher for the Sales CRUD CLI.

Parses one menu selection into a closed set of commands, collects the input
that command needs, runs exactly one record operation, and reports the result.

Usage:
    from sales_crud.dispatcher import MenuDispatcher
    from sales_crud.infrastructure import get_collection

    MenuDispatcher(get_collection()).run()
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Dict, List, Optional

import typer
from pymongo.collection import Collection
from rich.console import Console

from sales_crud.domain.models import parse_record_id
from sales_crud.errors import InvalidMenuChoiceError
from sales_crud.operations import OperationResult, resolve_operation
from sales_crud.prompts import EchoFn, PromptFn, collect_record_fields, collect_record_id, prompt_line
from sales_crud.reporter import print_menu, print_result
from sales_crud.utils.logging import get_logger

log = get_logger(__name__)


class Command(IntEnum):
    EXIT = 0
    CREATE = 1
    READ = 2
    UPDATE = 3
    DELETE = 4


MENU_LABELS: Dict[Command, str] = {
    Command.CREATE: "Create record to be inserted",
    Command.READ: "Read record",
    Command.UPDATE: "Update record",
    Command.DELETE: "Delete Record",
    Command.EXIT: "Exit",
}

_OPERATION_NAMES: Dict[Command, str] = {
    Command.CREATE: "create",
    Command.READ: "read",
    Command.UPDATE: "update",
    Command.DELETE: "delete",
}


def parse_command(text: str) -> Optional[Command]:
    """
    Parse a menu selection.

    Returns None for an integer that is not on the menu.

    Raises
    ------
    InvalidMenuChoiceError
        If `text` is not an integer.
    """
    try:
        value = int(text.strip())
    except ValueError as exc:
        raise InvalidMenuChoiceError(text) from exc
    try:
        return Command(value)
    except ValueError:
        return None


class MenuDispatcher:
    """
    Runs menu commands against one collection.

    Parameters
    ----------
    collection : Collection
        Target collection for every operation.
    console : Console | None
        Rich console used for the menu and results.
    prompt : callable
        Reads one line of input given a prompt text.
    echo : callable
        Prints input-collection diagnostics (e.g. revenue parse errors).
    """

    def __init__(
        self,
        collection: Collection,
        console: Optional[Console] = None,
        prompt: PromptFn = prompt_line,
        echo: EchoFn = typer.echo,
    ) -> None:
        self.collection = collection
        self.console = console or Console()
        self.prompt = prompt
        self.echo = echo
        self._handlers: Dict[Command, Callable[[], OperationResult]] = {
            Command.CREATE: self._create,
            Command.READ: self._read,
            Command.UPDATE: self._update,
            Command.DELETE: self._delete,
        }

    def _operation(self, command: Command):
        return resolve_operation(_OPERATION_NAMES[command], self.collection)

    def _create(self) -> OperationResult:
        fields = collect_record_fields(self.prompt, self.echo)
        return self._operation(Command.CREATE).execute(fields)

    def _read(self) -> OperationResult:
        return self._operation(Command.READ).execute()

    def _update(self) -> OperationResult:
        # The id is validated before the new values are asked for.
        object_id = parse_record_id(collect_record_id(self.prompt))
        fields = collect_record_fields(self.prompt, self.echo)
        return self._operation(Command.UPDATE).execute(object_id, fields)

    def _delete(self) -> OperationResult:
        object_id = parse_record_id(collect_record_id(self.prompt))
        return self._operation(Command.DELETE).execute(object_id)

    def dispatch(self, command: Command) -> OperationResult:
        """Execute one non-exit command and print its result."""
        if command is Command.EXIT:
            raise ValueError("EXIT has no operation to dispatch")
        log.info(f"[COMMAND] {command.name}", extra={"command": command.name})
        result = self._handlers[command]()
        print_result(result, self.console)
        return result

    def run(self, repeat: bool = False) -> List[OperationResult]:
        """
        Show the menu and execute selections.

        With `repeat=False` exactly one command runs and the method returns.
        With `repeat=True` the menu comes back after each command until `0`.
        An integer that is not on the menu re-shows the menu in both modes.

        Returns
        -------
        List[OperationResult]
            Results of the commands executed, in order.
        """
        results: List[OperationResult] = []
        menu = sorted(MENU_LABELS.items(), key=lambda item: (item[0] == Command.EXIT, item[0]))
        while True:
            print_menu(self.console, [(int(command), label) for command, label in menu])
            command = parse_command(self.prompt("Select your option"))
            if command is None:
                self.console.print("[yellow]Unknown option, choose one from the menu.[/yellow]")
                continue
            if command is Command.EXIT:
                log.info("[COMMAND] EXIT", extra={"command": command.name})
                break
            results.append(self.dispatch(command))
            if not repeat:
                break
        return results


__all__ = ["Command", "MENU_LABELS", "MenuDispatcher", "parse_command"]
