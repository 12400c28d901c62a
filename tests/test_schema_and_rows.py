"""Schema extraction, value classification and row assembly."""

import pytest

from helpers import XSD_INT
from sparql_table.config import UnknownKindPolicy
from sparql_table.errors import BindingError, DecodeError, SchemaError, UnknownValueKindError
from sparql_table.sparql.assembler import assemble_columns
from sparql_table.sparql.classifier import classify
from sparql_table.sparql.schema import extract_columns
from sparql_table.sparql.tree import ResponseTree, ValueNode
from sparql_table.table import TypedValue, ValueKind


# ── Schema ─────────────────────────────────────────────────────


def test_extract_columns_keeps_declared_order():
    tree = ResponseTree(variables=("z", "a", "m"))
    assert extract_columns(tree) == ("z", "a", "m")


def test_zero_columns_is_valid():
    assert extract_columns(ResponseTree(variables=())) == ()


def test_missing_header_raises():
    with pytest.raises(SchemaError):
        extract_columns(ResponseTree(variables=None))


@pytest.mark.parametrize("variables", [("a", "a"), ("a", "")])
def test_invalid_variable_names_raise(variables):
    with pytest.raises(SchemaError):
        extract_columns(ResponseTree(variables=variables))


# ── Classifier ─────────────────────────────────────────────────


@pytest.mark.parametrize(
    "node, expected",
    [
        (ValueNode("uri", "http://x/1"), TypedValue(ValueKind.IDENTIFIER, "http://x/1")),
        (ValueNode("bnode", "b1"), TypedValue(ValueKind.BLANK_NODE, "b1")),
        (ValueNode("literal", "plain"), TypedValue(ValueKind.LITERAL, "plain")),
        (
            ValueNode("literal", "hola", language="es"),
            TypedValue(ValueKind.LITERAL, "hola", language="es"),
        ),
        (
            ValueNode("literal", "3", datatype=XSD_INT),
            TypedValue(ValueKind.TYPED_LITERAL, "3", datatype=XSD_INT),
        ),
        (
            ValueNode("typed-literal", "3", datatype=XSD_INT),
            TypedValue(ValueKind.TYPED_LITERAL, "3", datatype=XSD_INT),
        ),
    ],
)
def test_classify_known_markers(node, expected):
    assert classify(node) == expected


def test_typed_literal_without_datatype_raises():
    with pytest.raises(DecodeError):
        classify(ValueNode("typed-literal", "3"))


def test_unknown_marker_defaults_to_literal():
    value = classify(ValueNode("mystery", "text"))
    assert value == TypedValue(ValueKind.LITERAL, "text")


def test_unknown_marker_with_datatype_stays_typed():
    value = classify(ValueNode("mystery", "1", datatype=XSD_INT))
    assert value.kind is ValueKind.TYPED_LITERAL


def test_unknown_marker_under_error_policy_raises():
    with pytest.raises(UnknownValueKindError) as excinfo:
        classify(ValueNode("mystery", "text"), UnknownKindPolicy.ERROR)
    assert excinfo.value.marker == "mystery"
    assert isinstance(excinfo.value, DecodeError)


# ── Assembler ──────────────────────────────────────────────────


def test_assemble_aligns_by_name_and_fills_none():
    tree = ResponseTree(
        variables=("a", "b"),
        entries=(
            {"b": ValueNode("uri", "http://b/1"), "a": ValueNode("uri", "http://a/1")},
            {"a": ValueNode("literal", "only-a")},
            {},
        ),
    )
    a, b = assemble_columns(tree, ("a", "b"))

    assert [v.lexical if v else None for v in a] == ["http://a/1", "only-a", None]
    assert [v.lexical if v else None for v in b] == ["http://b/1", None, None]


def test_assemble_never_coalesces_duplicate_rows():
    row = {"a": ValueNode("uri", "http://a/1")}
    tree = ResponseTree(variables=("a",), entries=(row, dict(row)))
    (a,) = assemble_columns(tree, ("a",))
    assert len(a) == 2


def test_assemble_rejects_undeclared_binding():
    tree = ResponseTree(
        variables=("a",),
        entries=({"a": ValueNode("uri", "http://a")}, {"zzz": ValueNode("uri", "http://z")}),
    )
    with pytest.raises(BindingError) as excinfo:
        assemble_columns(tree, ("a",))
    assert excinfo.value.variable == "zzz"
    assert excinfo.value.row_index == 1


def test_assemble_passes_policy_to_classifier():
    tree = ResponseTree(variables=("a",), entries=({"a": ValueNode("odd", "x")},))
    with pytest.raises(UnknownValueKindError):
        assemble_columns(tree, ("a",), UnknownKindPolicy.ERROR)
