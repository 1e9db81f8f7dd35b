"""Click CLI: analyze | channel | validate | classify."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from comment_analytics.collection.loader import InvalidContentError
from comment_analytics.collection.store import ContentStore, parse_channel_ref, parse_video_ref

_content_root_option = click.option(
    "--content-root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Content store root (default: CONTENT_ROOT or ./content)",
)


@click.group()
def cli() -> None:
    """Comment analytics for video creators."""


@cli.command()
@click.option(
    "--video",
    "-v",
    "video_ref",
    default=None,
    help="youtube:<videoId>, a bare id, or a YouTube URL (default: every video)",
)
@click.option(
    "--overwrite", is_flag=True, default=False, help="Recompute even if analytics.json is valid"
)
@_content_root_option
def analyze(video_ref: str | None, overwrite: bool, content_root: Path | None) -> None:
    """Analyze comments.json → analytics.json for one or all videos."""
    from comment_analytics.pipeline import AnalysisPipeline

    try:
        video = parse_video_ref(video_ref) if video_ref else None
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--video") from exc

    pipeline = AnalysisPipeline(store=ContentStore(content_root))
    try:
        outcomes = pipeline.run(video=video, overwrite=overwrite)
    except (InvalidContentError, FileNotFoundError, ValueError) as exc:
        click.echo(f"Analysis failed: {exc}", err=True)
        sys.exit(1)

    if video is not None and outcomes and outcomes[0].analytics is None:
        click.echo(f"No comments.json for {video}.", err=True)
        sys.exit(1)


@cli.command()
@click.option("--channel", "-c", "channel_ref", required=True, help="youtube:<channelId>")
@_content_root_option
def channel(channel_ref: str, content_root: Path | None) -> None:
    """Aggregate analyzed videos → channel-aggregate.json"""
    from comment_analytics.analysis.channel import ChannelAggregator
    from comment_analytics.analysis.radar import radar_buckets
    from comment_analytics.analysis.takeaways import format_percent

    try:
        platform, channel_id = parse_channel_ref(channel_ref)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--channel") from exc

    aggregator = ChannelAggregator(store=ContentStore(content_root))
    try:
        aggregate = aggregator.run(platform, channel_id)
    except (InvalidContentError, FileNotFoundError, ValueError) as exc:
        click.echo(f"Channel aggregation failed: {exc}", err=True)
        sys.exit(1)

    click.echo(
        f"Aggregated {aggregate.video_count} videos "
        f"({aggregate.total_comments:,} comments) for {platform}:{channel_id}"
    )
    for bucket in radar_buckets(aggregate.radar, aggregate.total_comments):
        click.echo(f"  {bucket.label}: {bucket.count:,} ({format_percent(bucket.rate)})")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(path: Path) -> None:
    """Check whether an analytics.json can be reused without recomputing."""
    from comment_analytics.collection.loader import read_json
    from comment_analytics.validation import parse_comment_analytics

    try:
        result = parse_comment_analytics(read_json(path))
    except InvalidContentError as exc:
        click.echo(f"invalid: {exc}", err=True)
        sys.exit(1)

    if result.ok:
        click.echo(f"valid: {result.analytics.comment_count:,} comments")
        return
    click.echo(f"invalid ({result.issue.kind.value}): {result.issue.reason}", err=True)
    sys.exit(1)


@cli.command()
@click.argument("text")
def classify(text: str) -> None:
    """Print the per-comment signals for TEXT as JSON."""
    from comment_analytics.detection.classifier import CommentClassifier

    signals = CommentClassifier().classify(text)
    if signals is None:
        click.echo("Comment is empty after normalization.", err=True)
        sys.exit(1)
    click.echo(json.dumps(signals.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
