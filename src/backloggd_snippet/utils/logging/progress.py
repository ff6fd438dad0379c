# ABOUTME: Busy indicator for the CLI using Rich's spinner progress
# ABOUTME: Shown while the extraction pipeline reports itself as loading

from typing import Any

from rich.progress import Progress, SpinnerColumn, TextColumn


class SimpleProgressTracker:
    """Relabels the spinner as the pipeline moves between stages."""

    def __init__(self, progress: Progress, task_id: Any):
        self.progress = progress
        self.task_id = task_id

    def update_description(self, description: str) -> None:
        self.progress.update(self.task_id, description=description)


def create_smart_progress(
    console, initial_description: str = "🎮 Fetching review..."
) -> tuple[Progress, Any, SimpleProgressTracker]:
    """Create a simple progress display with spinner.

    Args:
        console: Rich console instance
        initial_description: Initial progress description

    Returns:
        Tuple of (progress, task_id, tracker)
    """
    progress = Progress(
        SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console, transient=True
    )

    task_id = progress.add_task(initial_description, total=None)
    tracker = SimpleProgressTracker(progress, task_id)

    return progress, task_id, tracker
