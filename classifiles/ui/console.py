"""Console UI wrapper using Rich library."""

from typing import Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Regular output goes to stdout, errors go to stderr.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        """Initialize with Rich consoles."""
        self.console = console if console is not None else Console()
        self.error_console = (
            error_console if error_console is not None else Console(stderr=True)
        )

    def print_info(self, message: str) -> None:
        """Print an info message with blue styling."""
        self.console.print(f"[blue]{escape(message)}[/blue]")

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        self.error_console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)

    def print_success(self, message: str) -> None:
        """Print a success message with green styling."""
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def print_counts(self, title: str, counts: Dict[str, int]) -> None:
        """
        Print a two-column table of counts.

        Args:
            title: Table title.
            counts: Mapping of label to count, printed sorted by label.
        """
        if not counts:
            return
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Type")
        table.add_column("Files", justify="right")
        for label, count in sorted(counts.items()):
            table.add_row(label, str(count))
        self.console.print(table)
