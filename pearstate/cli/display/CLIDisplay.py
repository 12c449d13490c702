"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console

from pearstate.constants import DEFAULT_TIMESTAMP_FORMAT

from .Display import Display


class CLIDisplay(Display):
    """Rich-backed CLI display: messages to stderr, command output to stdout."""

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr)

    def _timestamp(self) -> str:
        return datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {message}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {message}")

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {message}")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = "yaml"
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = "json"

        if sys.stdout.isatty():
            from rich.syntax import Syntax

            Console(file=sys.stdout).print(Syntax(text.rstrip("\n"), lexer, theme="monokai"))
        else:
            sys.stdout.write(text)
