"""Tests for the click CLI."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner
from conftest import CHANNEL_ID, SCENARIO_TEXTS, VIDEO_A, VIDEO_B

from comment_analytics.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def tree(content_tree):
    content_tree.add_video(VIDEO_A, SCENARIO_TEXTS)
    content_tree.add_video(VIDEO_B, ["great video", "loved the editing"])
    return content_tree


def _root_args(tree):
    return ["--content-root", str(tree.root)]


def _channel_args(tree, ref=f"youtube:{CHANNEL_ID}"):
    return ["channel", "--channel", ref, *_root_args(tree)]


# ---------------------------------------------------------------------------
# analyze
# ---------------------------------------------------------------------------


def test_analyze_all(runner, tree):
    result = runner.invoke(cli, ["analyze", *_root_args(tree)])
    assert result.exit_code == 0, result.output
    assert "done, 2 video(s) up to date" in result.output
    assert (tree.video_dir(VIDEO_A) / "analytics.json").is_file()
    assert (tree.video_dir(VIDEO_B) / "analytics.json").is_file()


def test_analyze_single_video_by_url(runner, tree):
    url = f"https://www.youtube.com/watch?v={VIDEO_A}"
    result = runner.invoke(cli, ["analyze", "--video", url, *_root_args(tree)])
    assert result.exit_code == 0, result.output
    assert f"youtube:{VIDEO_A}: computed" in result.output
    assert not (tree.video_dir(VIDEO_B) / "analytics.json").exists()


def test_analyze_reuses_then_overwrites(runner, tree):
    args = ["analyze", "--video", f"youtube:{VIDEO_A}", *_root_args(tree)]
    runner.invoke(cli, args)
    assert "reused" in runner.invoke(cli, args).output
    assert "computed" in runner.invoke(cli, [*args, "--overwrite"]).output


def test_analyze_bad_reference(runner, tree):
    result = runner.invoke(cli, ["analyze", "--video", "vimeo:123", *_root_args(tree)])
    assert result.exit_code == 2


def test_analyze_unknown_video(runner, tree):
    result = runner.invoke(cli, ["analyze", "--video", "zzzzzzzzzzz", *_root_args(tree)])
    assert result.exit_code == 1
    assert "Analysis failed" in result.output


def test_analyze_malformed_comments(runner, tree):
    (tree.video_dir(VIDEO_B) / "comments.json").write_text("[]", encoding="utf-8")
    result = runner.invoke(cli, ["analyze", *_root_args(tree)])
    assert result.exit_code == 1
    assert "no valid comment records" in result.output


# ---------------------------------------------------------------------------
# channel
# ---------------------------------------------------------------------------


def test_channel_aggregate(runner, tree):
    runner.invoke(cli, ["analyze", *_root_args(tree)])
    result = runner.invoke(cli, _channel_args(tree))
    assert result.exit_code == 0, result.output
    assert "Aggregated 2 videos (6 comments)" in result.output
    assert "  Praise: " in result.output
    assert "  People: " in result.output
    path = tree.base / "channels" / CHANNEL_ID / "channel-aggregate.json"
    assert json.loads(path.read_text(encoding="utf-8"))["videoCount"] == 2


def test_channel_before_analyze_fails(runner, tree):
    result = runner.invoke(cli, _channel_args(tree))
    assert result.exit_code == 1
    assert "Channel aggregation failed" in result.output


def test_channel_bad_reference(runner, tree):
    result = runner.invoke(cli, _channel_args(tree, ref=CHANNEL_ID))
    assert result.exit_code == 2


# ---------------------------------------------------------------------------
# validate / classify
# ---------------------------------------------------------------------------


def test_validate_fresh_output(runner, tree):
    runner.invoke(cli, ["analyze", *_root_args(tree)])
    path = tree.video_dir(VIDEO_A) / "analytics.json"
    result = runner.invoke(cli, ["validate", str(path)])
    assert result.exit_code == 0
    assert "valid: 4 comments" in result.output


def test_validate_rejects_other_schema(runner, tmp_path):
    path = tmp_path / "analytics.json"
    path.write_text(json.dumps({"schema": "old"}), encoding="utf-8")
    result = runner.invoke(cli, ["validate", str(path)])
    assert result.exit_code == 1
    assert "SCHEMA_MISMATCH" in result.output


def test_validate_unparseable_file(runner, tmp_path):
    path = tmp_path / "analytics.json"
    path.write_text("{", encoding="utf-8")
    result = runner.invoke(cli, ["validate", str(path)])
    assert result.exit_code == 1
    assert "invalid" in result.output


def test_classify_prints_signals(runner):
    result = runner.invoke(cli, ["classify", "You should add captions."])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["isSuggestion"] is True
    assert data["sentiment"] == "neutral"


def test_classify_blank_text(runner):
    result = runner.invoke(cli, ["classify", "   "])
    assert result.exit_code == 1
