"""YAML settings loader and serialization tags."""

import pytest

from sparql_table.config import (
    BatchConfig,
    DecoderConfig,
    NormalizerConfig,
    UnknownKindPolicy,
    load_config,
)
from sparql_table.errors import DecodeError
from sparql_table.sparql.formats import ResultFormat


def write(tmp_path, text):
    path = tmp_path / "sparql-table.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    config = NormalizerConfig()
    assert config.decoder == DecoderConfig(UnknownKindPolicy.LITERAL, ResultFormat.JSON)
    assert config.batch == BatchConfig(max_workers=None)


def test_load_full_config(tmp_path):
    path = write(
        tmp_path,
        "decoder:\n"
        "  unknown_kind: error\n"
        "  default_format: application/sparql-results+xml\n"
        "batch:\n"
        "  max_workers: 3\n",
    )
    result = load_config(path)

    assert result.ok
    assert result.data.decoder.unknown_kind is UnknownKindPolicy.ERROR
    assert result.data.decoder.default_format is ResultFormat.XML
    assert result.data.batch.max_workers == 3


def test_empty_file_means_defaults(tmp_path):
    result = load_config(write(tmp_path, ""))
    assert result.ok
    assert result.data == NormalizerConfig()


def test_partial_config_keeps_other_defaults(tmp_path):
    result = load_config(write(tmp_path, "decoder:\n  unknown_kind: LITERAL\n"))
    assert result.ok
    assert result.data.decoder.unknown_kind is UnknownKindPolicy.LITERAL
    assert result.data.decoder.default_format is ResultFormat.JSON


def test_missing_file(tmp_path):
    result = load_config(tmp_path / "nope.yaml")
    assert not result.ok
    assert "not found" in result.error


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("decoder: [unclosed\n", "YAML parse error"),
        ("- just\n- a list\n", "must be a mapping"),
        ("decoder:\n  unknown_kind: maybe\n", "value error"),
        ("decoder:\n  default_format: csv\n", "value error"),
        ("batch:\n  max_workers: 0\n", "value error"),
        ("decoder: 5\n", "structure error"),
    ],
)
def test_invalid_config_returns_fail(tmp_path, text, fragment):
    result = load_config(write(tmp_path, text))
    assert not result.ok
    assert fragment in result.error


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("xml", ResultFormat.XML),
        ("JSON", ResultFormat.JSON),
        (ResultFormat.XML, ResultFormat.XML),
        ("application/sparql-results+json", ResultFormat.JSON),
        ("application/sparql-results+xml;charset=UTF-8", ResultFormat.XML),
        ("text/xml", ResultFormat.XML),
        ("application/json", ResultFormat.JSON),
    ],
)
def test_format_tags(tag, expected):
    assert ResultFormat.parse(tag) is expected


@pytest.mark.parametrize("tag", ["csv", "text/turtle", "", 3])
def test_unsupported_format_tags(tag):
    with pytest.raises(DecodeError):
        ResultFormat.parse(tag)


def test_media_type():
    assert ResultFormat.JSON.media_type == "application/sparql-results+json"
    assert ResultFormat.XML.media_type == "application/sparql-results+xml"
