# ABOUTME: Tests for rich table builders used by the CLI
# ABOUTME: Checks review and logging status tables render the expected rows

from rich.console import Console
from rich.table import Table

from backloggd_snippet.core.models import ReviewInfo
from backloggd_snippet.utils.rich_tables import (
    create_key_value_table,
    create_logging_status_table,
    create_review_table,
    print_rich_table,
)


def _render(table: Table) -> str:
    console = Console(record=True, width=200)
    print_rich_table(console, table)
    return console.export_text()


class TestRichTables:
    def test_key_value_table(self):
        table = create_key_value_table("Title", {"a": "1", "b": "2"})

        assert table.row_count == 2

    def test_review_table(self):
        review = ReviewInfo(
            url="https://backloggd.com/u/bob/review/42",
            date="Mar 14, 2024",
            reviewer="bob",
            reviewer_url="https://backloggd.com/u/bob/",
            reviewer_avatar="https://backloggd.com/avatars/bob.png",
            game="Outer Wilds",
            game_url="https://backloggd.com/games/outer-wilds/",
            stars_percentage="80%",
            body="<p>Loved it.</p>",
            status="Completed",
            status_url="https://backloggd.com/u/bob/games/played/type:completed",
        )

        output = _render(create_review_table(review))

        assert "Outer Wilds" in output
        assert "Not listed" in output
        assert "80%" in output
        assert "Missing" in output

    def test_logging_status_table(self):
        status = {
            "mode": "production",
            "log_directory": None,
            "log_files": {"main": None, "errors": None},
            "third_party_suppressed": ["httpx", "httpcore"],
        }

        output = _render(create_logging_status_table(status))

        assert "Logging Configuration" in output
        assert "Production" in output
        assert "httpx, httpcore" in output
