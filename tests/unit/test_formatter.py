"""Tests for output formatting."""

from __future__ import annotations

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from vra_cli.models.common import PageMetadata
from vra_cli.output.formatter import output, output_csv
from vra_cli.output.tables import cell


@pytest.fixture
def captured():
    buf = StringIO()
    console = Console(file=buf, force_terminal=False, width=200)
    with patch("vra_cli.output.formatter.console", console):
        yield buf


class TestCell:
    def test_none(self):
        assert cell(None) == ""

    def test_bool(self):
        assert cell(True) == "yes"
        assert cell(False) == "no"

    def test_list(self):
        assert cell(["192.168.110.200", "192.168.220.200"]) == "192.168.110.200, 192.168.220.200"
        assert cell([]) == "(none)"

    def test_dict(self):
        assert cell({"id": "x"}) == '{"id": "x"}'


class TestOutputJson:
    def test_dict(self, captured):
        output({"key": "val"}, "json")
        assert '"key": "val"' in captured.getvalue()

    def test_pydantic_model_uses_aliases(self, captured):
        output(PageMetadata(total_pages=3), "json")
        assert '"totalPages": 3' in captured.getvalue()


class TestOutputYaml:
    def test_list(self, captured):
        output([{"a": 1}], "yaml")
        assert "- a: 1" in captured.getvalue()


class TestOutputCsv:
    def test_csv_output(self, captured):
        output_csv(["Name", "Value"], [["a", "1"], ["b", None]])
        out = captured.getvalue()
        assert "Name,Value" in out
        assert "a,1" in out
        assert "b," in out

    def test_kv_as_csv(self, captured):
        output({"name": "hol-dev-11"}, "csv", kv=True)
        assert "name,hol-dev-11" in captured.getvalue()


class TestOutputTable:
    def test_kv_table(self, captured):
        output({"name": "hol-dev-11", "vm": True}, "table", kv=True, title="Test")
        out = captured.getvalue()
        assert "hol-dev-11" in out
        assert "yes" in out

    def test_columns_rows(self, captured):
        output(
            [{"a": 1}], "table",
            columns=["A", "B"], rows=[["1", ["x", "y"]]], title="Test",
        )
        assert "x, y" in captured.getvalue()

    def test_fallback_other(self, captured):
        output("plain text", "table")
        assert "plain text" in captured.getvalue()


class TestUnknownFormat:
    def test_raises(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            output({}, "xml")
