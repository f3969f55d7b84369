"""CLI commands for ranking digest content."""

import json
import logging
import sys
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import NoReturn

import click
import structlog

from src.config.constants import COMPONENT_CLI
from src.config.error_hints import format_validation_error
from src.config.loader import ConfigLoader, ConfigValidationError, load_config
from src.ingest import (
    FeedParseError,
    ItemsFileError,
    ItemsValidationError,
    load_items,
    merge_items,
    parse_feed,
)
from src.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_logging,
    parse_log_level,
)
from src.relevance import (
    ContentItem,
    ContentRanker,
    category_label,
    classify_content,
    format_ranking,
    log_content_ranking,
    score_relevance,
)
from src.settings.app import get_settings


logger = structlog.get_logger()


@dataclass
class RankOptions:
    """Options for the rank command."""

    item_paths: list[Path] = field(default_factory=list)
    feeds: list[tuple[str, Path]] = field(default_factory=list)
    config_path: Path | None = None
    top: int | None = None
    min_score: int | None = None
    market_moving: bool = False
    output_format: str = "text"
    json_logs: bool | None = None
    verbose: bool = False


def _setup_logging(json_logs: bool | None, verbose: bool) -> None:
    """Configure logging from flags, falling back to environment settings.

    Args:
        json_logs: Explicit JSON logging choice, or None for the setting.
        verbose: Force DEBUG level.
    """
    settings = get_settings()
    level = logging.DEBUG if verbose else parse_log_level(settings.log_level)
    use_json = settings.log_json if json_logs is None else json_logs
    configure_logging(level=level, json_format=use_json)


def _parse_feed_spec(spec: str) -> tuple[str, Path]:
    """Split a NAME=PATH feed option.

    Args:
        spec: Option value.

    Returns:
        Tuple of (source name, path).

    Raises:
        click.BadParameter: If the value has no name or no path.
    """
    name, sep, path = spec.partition("=")
    if not sep or not name.strip() or not path.strip():
        msg = f"Expected NAME=PATH, got '{spec}'"
        raise click.BadParameter(msg, param_hint="--feed")
    return name.strip(), Path(path.strip())


def _fail_with_errors(title: str, errors: list[dict[str, str]]) -> NoReturn:
    """Print validation errors with hints and exit with status 1."""
    click.echo(title, err=True)
    for error in errors:
        formatted = format_validation_error(
            location=error["loc"],
            message=error["msg"],
            error_type=error.get("type", "unknown"),
            include_hint=True,
        )
        click.echo(f"  - {formatted}", err=True)
    sys.exit(1)


def _collect_items(
    options: RankOptions, feed_max_chars: int
) -> list[ContentItem]:
    """Load submitted items then feed items, in that order.

    Args:
        options: Rank options with paths.
        feed_max_chars: Characters kept per feed entry.

    Returns:
        Merged item list.
    """
    batches: list[list[ContentItem]] = []

    for path in options.item_paths:
        try:
            batches.append(load_items(path))
        except ItemsValidationError as e:
            _fail_with_errors(f"Invalid items in {e.path}:", e.errors)
        except ItemsFileError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    for name, path in options.feeds:
        try:
            batches.append(parse_feed(path, source=name, max_chars=feed_max_chars))
        except FeedParseError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return merge_items(*batches)


def _execute_rank(options: RankOptions) -> None:
    """Run ingest, ranking, and selection, then print the result.

    Args:
        options: Rank options.
    """
    _setup_logging(options.json_logs, options.verbose)
    run_id = str(uuid.uuid4())
    bind_run_context(run_id)
    try:
        log = logger.bind(component=COMPONENT_CLI, command="rank")

        config_path = options.config_path or get_settings().config_path
        try:
            config = load_config(config_path)
        except ConfigValidationError as e:
            _fail_with_errors(f"Invalid configuration in {e.file_path}:", e.errors)

        items = _collect_items(options, config.feed_max_chars)
        log.info(
            "rank_started",
            item_files=len(options.item_paths),
            feeds=len(options.feeds),
            items_in=len(items),
        )

        top = config.top_n if options.top is None else options.top
        min_score = (
            config.min_score if options.min_score is None else options.min_score
        )
        market_moving = options.market_moving or config.market_moving_only

        ranker = ContentRanker()
        selected = ranker.select_for_digest(
            items, n=top, min_score=min_score, market_moving_only=market_moving
        )
        log_content_ranking(
            selected, label="Digest selection", limit=config.diagnostic_limit
        )

        if options.output_format == "json":
            payload = [item.model_dump(mode="json") for item in selected]
            click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            for line in format_ranking(
                selected, label="Digest selection", limit=len(selected)
            ):
                click.echo(line)

        log.info("rank_finished", items_in=len(items), items_out=len(selected))
    finally:
        clear_run_context()


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """Macro digest content ranking CLI."""


@cli.command()
@click.option(
    "--items",
    "item_paths",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON or YAML file of submitted items (repeatable).",
)
@click.option(
    "--feed",
    "feed_specs",
    multiple=True,
    type=str,
    help="RSS/Atom document as NAME=PATH (repeatable).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to relevance.yaml (default: $MACRO_DIGEST_CONFIG or built-ins).",
)
@click.option("--top", type=int, default=None, help="Number of items to keep.")
@click.option(
    "--min-score", "min_score", type=int, default=None, help="Drop items below this score."
)
@click.option(
    "--market-moving",
    is_flag=True,
    help="Keep only market-moving categories.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--json-logs/--no-json-logs",
    default=None,
    help="Use JSON format for logs (default: $LOG_JSON).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def rank(  # noqa: PLR0913
    item_paths: tuple[Path, ...],
    feed_specs: tuple[str, ...],
    config_path: Path | None,
    top: int | None,
    min_score: int | None,
    market_moving: bool,
    output_format: str,
    json_logs: bool | None,
    verbose: bool,
) -> None:
    """Rank submitted items and feed entries for the digest."""
    if not item_paths and not feed_specs:
        raise click.UsageError("Provide at least one --items file or --feed.")

    options = RankOptions(
        item_paths=list(item_paths),
        feeds=[_parse_feed_spec(spec) for spec in feed_specs],
        config_path=config_path,
        top=top,
        min_score=min_score,
        market_moving=market_moving,
        output_format=output_format,
        json_logs=json_logs,
        verbose=verbose,
    )
    _execute_rank(options)


@cli.command()
@click.option("--title", type=str, default=None, help="Optional headline.")
@click.argument("text")
def classify(title: str | None, text: str) -> None:
    """Classify and score a single piece of TEXT."""
    category = classify_content(title, text)
    result = score_relevance(title, text, category)

    click.echo(f"Category: {category.value} ({category_label(category)})")
    click.echo(f"Score: {result.score}")
    click.echo(f"Breaking: {'yes' if result.is_breaking else 'no'}")


@cli.command()
@click.argument(
    "config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
def validate(config_path: Path) -> None:
    """Validate a relevance configuration file."""
    _setup_logging(json_logs=False, verbose=False)
    loader = ConfigLoader()

    try:
        config = loader.load(config_path)
    except ConfigValidationError as e:
        _fail_with_errors("Configuration validation failed:", e.errors)

    click.echo("Configuration is valid!")
    click.echo(f"  Top N: {config.top_n}")
    click.echo(f"  Min score: {config.min_score}")
    click.echo(f"  Market moving only: {config.market_moving_only}")
    click.echo(f"  Checksum: {loader.file_checksum}")


if __name__ == "__main__":
    cli()
