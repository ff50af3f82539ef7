import pytest

from core.models import ParseResult, UnifiedTable
from stages import SchemaUnifier


def _result(name, fields, rows, sheet=None):
    return ParseResult(source_name=name, sheet_name=sheet, fields=fields, rows=rows)


def test_headers_are_union_in_first_seen_order():
    results = [
        _result("a.csv", ["a", "b"], [{"a": "1", "b": "2"}]),
        _result("b.csv", ["b", "c"], [{"b": "3", "c": "4"}]),
    ]

    table = SchemaUnifier().unify(results)

    assert table.headers == ["a", "b", "c"]
    assert table.rows == [
        {"a": "1", "b": "2", "c": None},
        {"a": None, "b": "3", "c": "4"},
    ]


def test_blank_fields_are_skipped_and_names_trimmed():
    results = [
        _result("a.csv", [" id ", "", "  "], [{" id ": "1", "": "x"}]),
        _result("b.csv", ["id", "name"], [{"id ": "2", "name": "bob"}]),
    ]

    table = SchemaUnifier().unify(results)

    assert table.headers == ["id", "name"]
    assert table.rows == [
        {"id": "1", "name": None},
        {"id": "2", "name": "bob"},
    ]


def test_every_row_has_exactly_the_unified_headers():
    results = [
        _result("a.csv", ["x"], [{"x": "1"}, {}]),
        _result("b.xlsx", ["y", "z"], [{"y": None, "z": "q"}], sheet="S1"),
        _result("b.xlsx", ["z", "w"], [{"w": "5"}], sheet="S2"),
    ]

    table = SchemaUnifier().unify(results)

    assert table.headers == ["x", "y", "z", "w"]
    assert len(table.rows) == 4
    for row in table.rows:
        assert list(row.keys()) == table.headers
    assert table.rows[1] == {"x": None, "y": None, "z": None, "w": None}
    assert table.rows[3]["w"] == "5"


def test_unify_is_deterministic():
    results = [
        _result("a.csv", ["k", "v"], [{"k": "1", "v": "a"}, {"k": "2", "v": "b"}]),
        _result("b.csv", ["v", "extra"], [{"v": "c", "extra": "e"}]),
    ]
    unifier = SchemaUnifier()

    assert unifier.unify(results) == unifier.unify(results)


def test_build_schema_has_no_duplicates():
    results = [
        _result("a.csv", ["a", "b", "a"], []),
        _result("b.csv", ["b ", " a", "c"], []),
    ]

    assert SchemaUnifier().build_schema(results) == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_execute_returns_unified_table():
    unifier = SchemaUnifier()
    results = [_result("a.csv", ["a"], [{"a": "1"}])]

    assert unifier.validate_input(results)
    assert not unifier.validate_input([])

    table = await unifier.execute(results)

    assert isinstance(table, UnifiedTable)
    assert table.rows == [{"a": "1"}]
