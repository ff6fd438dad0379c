# ABOUTME: Rich table utilities for styled, colorful CLI output
# ABOUTME: Pre-configured tables for review records and logging status

from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a two-column key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_review_table(review: Any) -> Table:
    """Create a table summarizing an extracted review.

    Args:
        review: ReviewInfo record

    Returns:
        Styled review table
    """
    review_data = {
        "🎮 Game": review.game,
        "🌐 Game URL": review.game_url,
        "🕹️ Platform": review.platform or "Not listed",
        "👤 Reviewer": review.reviewer,
        "📅 Date": review.date,
        "⭐ Rating": review.stars_percentage or "Unrated",
        "📌 Status": review.status,
        "🏆 Mastered": "✅" if review.mastered else "❌",
        "🔁 Replay": "✅" if review.replay else "❌",
        "💜 Backer": "✅" if review.backer else "❌",
        "🖼️ Cover Art": "✅ Available" if review.image else "❌ Missing",
        "📝 Body Length": f"{len(review.body):,} chars",
    }

    return create_key_value_table(
        title="📰 Review",
        data=review_data,
        title_style="bold magenta",
        key_style="cyan",
        value_style="white",
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing.

    Args:
        console: Rich console instance
        table: Configured table to print
    """
    console.print()
    console.print(table)
    console.print()
