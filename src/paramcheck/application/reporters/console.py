"""Console reporter: errors → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from collections.abc import Sequence

    from paramcheck.domain.model.validation_error import ValidationError

_NO_FIELD = "-"


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        color: Emit ANSI styles. False = plain text table.
        title: Table title.
    """

    width: int = 120
    color: bool = True
    title: str = "Validation errors"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs errors as a rich table.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, errors: Sequence[ValidationError]) -> str:
        """Format errors as rich formatted string.

        Args:
            errors: Errors to format.

        Returns:
            Summary line followed by a field/message table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            highlight=False,
            width=self._config.width,
        )

        if not errors:
            console.print("[bold green]No validation errors[/bold green]")
            return output.getvalue()

        console.print(f"[bold red]{len(errors)} validation error(s)[/bold red]")
        console.print(self._build_table(errors))
        return output.getvalue()

    def _build_table(self, errors: Sequence[ValidationError]) -> Table:
        """Build one row per error, in accumulation order."""
        table = Table(title=self._config.title, show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Field", style="cyan")
        table.add_column("Message")

        for i, error in enumerate(errors, start=1):
            # Text, not markup: messages may contain "[...]" from patterns and choices
            table.add_row(str(i), Text(error.field or _NO_FIELD), Text(error.message))
        return table
