"""Integration tests for svg-less.

Runs whole collections through ``collect_mixins`` using the svg fixtures.
"""

import json
from pathlib import Path
from urllib.parse import unquote

import pytest

from svg_less import (
    MalformedSourceError,
    SourceFile,
    StreamingUnsupportedError,
    collect_from_pairs,
    collect_mixins,
)
from svg_less.core.encoding import strip_markup_noise


def load_manifest(fixtures_dir: Path) -> dict:
    """Load fixture manifest with expected values."""
    manifest_path = fixtures_dir / "manifest.json"
    if not manifest_path.exists():
        pytest.skip("manifest.json not found")
    return json.loads(manifest_path.read_text())


def load_sources(fixtures_dir: Path) -> list:
    manifest = load_manifest(fixtures_dir)
    return [
        SourceFile(str(fixtures_dir / fixture["file"]), (fixtures_dir / fixture["file"]).read_bytes())
        for fixture in manifest["fixtures"]
    ]


class TestFixtureCollection:
    """Golden fixture runs."""

    def test_manifest_valid(self, fixtures_dir):
        manifest = load_manifest(fixtures_dir)
        assert "fixtures" in manifest
        assert len(manifest["fixtures"]) > 0
        for fixture in manifest["fixtures"]:
            assert (fixtures_dir / fixture["file"]).exists()

    def test_selectors_and_sizes(self, fixtures_dir):
        manifest = load_manifest(fixtures_dir)
        artifact = collect_mixins(load_sources(fixtures_dir), addSize=True)
        blocks = artifact.contents.split("\n}\n")

        assert artifact.path == "icons.less"
        assert len(blocks) == len(manifest["fixtures"])
        for block, fixture in zip(blocks, manifest["fixtures"]):
            lines = block.split("\n")
            assert lines[0] == f"{fixture['selector']} {{"
            assert f"    width: {fixture['width']};" in lines
            assert f"    height: {fixture['height']};" in lines

    def test_embedded_data_is_clean(self, fixtures_dir):
        sources = load_sources(fixtures_dir)
        artifact = collect_mixins(sources)

        uris = [
            line.split("charset=utf8, ", 1)[1][: -len('");')]
            for line in artifact.contents.split("\n")
            if "background-image" in line
        ]
        assert len(uris) == len(sources)
        for uri, source in zip(uris, sources):
            assert "%0A" not in uri
            assert "%09" not in uri
            assert "%2F" not in uri
            assert unquote(uri) == strip_markup_noise(source.text())
            assert "<?xml" not in unquote(uri)
            assert "<!--" not in unquote(uri)


def test_default_configuration_end_to_end():
    """Two icons, one sized and one falling back to the defaults."""
    artifact = collect_from_pairs(
        [
            ("a.svg", '<svg width="10" height="10">...</svg>'),
            ("b.svg", "<svg>...</svg>"),
        ],
        {"addSize": True},
    )

    assert artifact.path == "icons.less"
    assert artifact.contents == (
        ".icon-a() {\n"
        '    background-image: url("data:image/svg+xml;charset=utf8, '
        '%3Csvg%20width%3D%2210%22%20height%3D%2210%22%3E...%3C/svg%3E");\n'
        "    width: 10px;\n"
        "    height: 10px;\n"
        "}\n"
        ".icon-b() {\n"
        '    background-image: url("data:image/svg+xml;charset=utf8, '
        '%3Csvg%3E...%3C/svg%3E");\n'
        "    width: 16px;\n"
        "    height: 16px;\n"
        "}"
    )


def test_empty_sequence():
    artifact = collect_mixins([])

    assert artifact.path == "icons.less"
    assert artifact.contents == ""


def test_null_entries_produce_no_blocks():
    artifact = collect_from_pairs(
        [("a.svg", "<svg/>"), ("dir", None), ("b.svg", "<svg/>"), ("c.svg", "")]
    )

    assert artifact.contents.count("background-image") == 2


def test_first_error_aborts_run(log_messages):
    def sources():
        yield SourceFile("a.svg", "<svg/>")
        yield SourceFile("b.svg", "<svg")
        raise AssertionError("run continued past a failing source")

    with pytest.raises(MalformedSourceError):
        collect_mixins(sources())

    errors = [r for r in log_messages if r["level"].name == "ERROR"]
    assert any("failed" in r["message"] for r in errors)


def test_streaming_source_aborts_run():
    with pytest.raises(StreamingUnsupportedError):
        collect_from_pairs([("a.svg", iter([b"<svg/>"]))])
