"""
shipit - UI Components
Standardized headers and colors
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

BRAND = "shipit"

BRAND_COLOR = "color(214)"


def show_header(
    title: str,
    details: Optional[dict] = None,
    console: Optional[Console] = None,
):
    """
    Display a standardized shipit command header.

    Args:
        title: Main title (e.g., "Deploy", "Run Command")
        details: Additional key-value pairs to display
        console: Rich Console instance (creates new if None)

    Example:
        show_header(
            title="Deploy",
            details={"Target": "deploy", "Host": "example.com"}
        )
    """
    if console is None:
        console = Console()

    prefix = f" [bold {BRAND_COLOR}]{BRAND}[/bold {BRAND_COLOR}] [dim]›[/dim]"

    console.print(f"{prefix} [bold white]{escape(title)}[/bold white]")

    if details:
        for key, value in details.items():
            console.print(f"{prefix} {escape(str(key))}: [cyan]{escape(str(value))}[/cyan]")

    console.print()
