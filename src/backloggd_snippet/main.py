# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands to extract, render, and export backloggd.com review snippets

from pathlib import Path

import asyncclick as click
from rich.console import Console
from rich.markup import escape

from backloggd_snippet.config import get_config
from backloggd_snippet.core.models import ReviewInfo
from backloggd_snippet.core.pipeline import ExtractionPipeline, PipelineState
from backloggd_snippet.core.urls import is_valid_review_url
from backloggd_snippet.extraction import ExtractionError
from backloggd_snippet.rendering import (
    ExportError,
    ExportFormatter,
    FileSink,
    SnippetRenderer,
    StreamSink,
    export_html,
)
from backloggd_snippet.utils.logging import (
    LoggingMode,
    configure_logging,
    create_smart_progress,
    get_logging_status,
    with_pipeline_context,
)
from backloggd_snippet.utils.rich_tables import (
    create_logging_status_table,
    create_review_table,
    print_rich_table,
)

console = Console()
err_console = Console(stderr=True)

STAGE_DESCRIPTIONS = {
    PipelineState.FETCHING_REVIEW: "🎮 Fetching review...",
    PipelineState.EXTRACTING_REVIEW: "🔍 Reading review...",
    PipelineState.FETCHING_GAME: "🕹️ Fetching game page...",
    PipelineState.EXTRACTING_IMAGE: "🖼️ Finding cover art...",
}


def _review_url_argument(ctx, param, value: str) -> str:
    if not is_valid_review_url(value):
        raise click.BadParameter("expected https://backloggd.com/u/<user>/review/<id>")
    return value


def _rendering_options(func):
    func = click.option(
        "--image/--no-image", "include_image", default=None, help="Include the game cover image"
    )(func)
    func = click.option(
        "--attribution/--no-attribution", "attribution", default=None, help="Credit the reviewer"
    )(func)
    return func


def _make_renderer(include_image: bool | None, attribution: bool | None) -> SnippetRenderer:
    config = get_config()
    return SnippetRenderer(
        include_image=config.include_image if include_image is None else include_image,
        attribution=config.attribution if attribution is None else attribution,
    )


async def _fetch_review(url: str, json_output: bool) -> ReviewInfo | None:
    """Run the extraction pipeline for url, reporting failures on stderr."""
    pipeline = ExtractionPipeline()
    with with_pipeline_context("review_snippet", review_url=url) as logger:
        try:
            if json_output:
                review = await pipeline.submit(url)
            else:
                progress, _, tracker = create_smart_progress(err_console, f"🎮 Fetching {url}")
                pipeline.watch_state(
                    lambda state: tracker.update_description(STAGE_DESCRIPTIONS.get(state, state.value))
                )
                with progress:
                    review = await pipeline.submit(url)
        except ExtractionError as e:
            logger.error("Review page could not be parsed", error=str(e))
            err_console.print(f"[red]❌ Review page layout not recognized: {escape(str(e))}[/red]")
            return None
        finally:
            await pipeline.close()

        if review is None:
            logger.warning("No review extracted", state=pipeline.state.value)
            err_console.print(f"[red]❌ Could not fetch review from {url}[/red]")
            return None

        logger.info("Review ready", game=review.game, reviewer=review.reviewer)
        return review


@click.command()
@click.argument("url", callback=_review_url_argument)
@click.pass_context
async def extract(ctx, url: str):
    """
    🎮 Extract review metadata from a backloggd.com review page.
    """
    json_output = ctx.obj["json_output"]
    review = await _fetch_review(url, json_output)
    if review is None:
        raise click.exceptions.Exit(1)

    if json_output:
        click.echo(review.model_dump_json(indent=2))
        return

    console.print(f"\n🎭 [bold magenta]{review.game}[/bold magenta] reviewed by [bold]{review.reviewer}[/bold]")
    print_rich_table(console, create_review_table(review))


@click.command()
@click.argument("url", callback=_review_url_argument)
@_rendering_options
@click.pass_context
async def render(ctx, url: str, include_image: bool | None, attribution: bool | None):
    """
    🖼️ Render a review as an HTML snippet.
    """
    review = await _fetch_review(url, ctx.obj["json_output"])
    if review is None:
        raise click.exceptions.Exit(1)
    click.echo(_make_renderer(include_image, attribution).render(review))


@click.command()
@click.argument("url", callback=_review_url_argument)
@_rendering_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the exported HTML to this file instead of stdout",
)
@click.pass_context
async def export(ctx, url: str, include_image: bool | None, attribution: bool | None, output: Path | None):
    """
    📋 Render a review and export paste-ready HTML.
    """
    review = await _fetch_review(url, ctx.obj["json_output"])
    if review is None:
        raise click.exceptions.Exit(1)
    snippet = _make_renderer(include_image, attribution).render(review)

    sink = FileSink(output) if output else StreamSink()
    formatter = ExportFormatter(link_style=get_config().export_link_style)
    try:
        export_html(snippet, sink, formatter)
    except ExportError as e:
        err_console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise click.exceptions.Exit(1)

    if output:
        err_console.print(f"[green]✅ HTML copied to {output}[/green]")
    else:
        err_console.print("[green]✅ HTML copied![/green]")


@click.command()
@click.argument("url")
async def validate(url: str):
    """
    🔎 Check whether a URL is a supported backloggd.com review URL.
    """
    if is_valid_review_url(url):
        console.print(f"[green]✅ {url} is a valid review URL[/green]")
        return
    console.print(f"[red]❌ {url} is not a backloggd.com review URL[/red]")
    raise click.exceptions.Exit(1)


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else config.log_mode

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    print_rich_table(console, create_logging_status_table(status))


@click.group(invoke_without_command=True)
@click.option("--json", "json_output", is_flag=True, help="Output structured JSON instead of rich tables")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json_output: bool, log_level: str | None, log_file: str | None):
    """
    🎮 Backloggd Snippet - Share backloggd.com reviews anywhere

    Fetch a review, pull in the game's cover art, and turn it into a portable
    HTML snippet ready to paste into other sites.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output

    _initialize_logging(json_output, log_level, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(extract)
app.add_command(render)
app.add_command(export)
app.add_command(validate)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
