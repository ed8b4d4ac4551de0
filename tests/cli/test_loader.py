"""Tests for reading graphs from JSON and CSV edge lists."""
from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from dagpath.graph.longest import longest_path
from dagpath.loader import GraphFormatError, load_graph, parse_csv, parse_json

TRIANGLE = {
    "nodes": ["A", "B", "C", "Z"],
    "edges": [
        {"source": "A", "target": "B", "weight": 1},
        {"source": "B", "target": "C", "weight": 2},
        {"source": "A", "target": "C", "weight": 5, "label": "shortcut"},
    ],
}


class TestJson:
    def test_nodes_edges_and_attributes(self) -> None:
        g = parse_json(json.dumps(TRIANGLE))
        assert list(g.nodes()) == ["A", "B", "C", "Z"]
        assert g.edge_count == 3
        shortcut = [e for e in g.edges() if e.attributes.get("label")][0]
        assert shortcut.attributes == {"weight": 5, "label": "shortcut"}

    def test_nodes_key_is_optional(self) -> None:
        g = parse_json(json.dumps({"edges": [{"source": 1, "target": 2}]}))
        assert list(g.nodes()) == [1, 2]

    def test_longest_path_from_json(self) -> None:
        result = longest_path(parse_json(json.dumps(TRIANGLE)))
        assert result.nodes == ("A", "C")
        assert result.value == 5.0

    def test_invalid_json(self) -> None:
        with pytest.raises(GraphFormatError, match="invalid JSON"):
            parse_json("{nope")

    def test_top_level_must_be_object(self) -> None:
        with pytest.raises(GraphFormatError, match="object"):
            parse_json("[]")

    def test_missing_target(self) -> None:
        doc = {"edges": [{"source": "A"}]}
        with pytest.raises(GraphFormatError, match=r"edges\[0\] is missing 'target'"):
            parse_json(json.dumps(doc), source="g.json")

    def test_src_and_dst_keys_are_attributes(self) -> None:
        doc = {"edges": [{"source": "A", "target": "B", "src": "db", "dst": "cache"}]}
        edge = next(parse_json(json.dumps(doc)).edges())
        assert (edge.source, edge.target) == ("A", "B")
        assert edge.attributes == {"src": "db", "dst": "cache"}

    @pytest.mark.parametrize("doc", [
        {"nodes": "AB", "edges": []},
        {"edges": {"source": "A", "target": "B"}},
    ])
    def test_nodes_and_edges_must_be_lists(self, doc: dict) -> None:
        with pytest.raises(GraphFormatError, match="must be a list"):
            parse_json(json.dumps(doc))

    def test_unhashable_node(self) -> None:
        doc = {"edges": [{"source": ["A"], "target": "B"}]}
        with pytest.raises(GraphFormatError, match="scalar"):
            parse_json(json.dumps(doc))


class TestCsv:
    def test_string_weights_are_numbers(self) -> None:
        g = parse_csv(io.StringIO("source,target,weight\nA,B,1\nB,C,2\nA,C,5\n"))
        result = longest_path(g)
        assert result.weighted
        assert result.nodes == ("A", "C")

    def test_empty_cell_is_left_out(self) -> None:
        g = parse_csv(io.StringIO("source,target,weight\nA,B,1\nB,C,\n"))
        bc = g.entering_edges("C")[0]
        assert "weight" not in bc.attributes
        assert not longest_path(g).weighted

    def test_src_and_dst_columns_are_attributes(self) -> None:
        g = parse_csv(io.StringIO("source,target,src,dst\nA,B,db,cache\n"))
        edge = g.entering_edges("B")[0]
        assert edge.source == "A"
        assert edge.attributes == {"src": "db", "dst": "cache"}

    def test_header_must_name_endpoints(self) -> None:
        with pytest.raises(GraphFormatError, match="header"):
            parse_csv(io.StringIO("from,to\nA,B\n"))

    def test_missing_endpoint_names_line(self) -> None:
        with pytest.raises(GraphFormatError, match="line 3"):
            parse_csv(io.StringIO("source,target\nA,B\nC,\n"), source="g.csv")


class TestLoadGraph:
    def test_format_from_suffix(self, tmp_path: Path) -> None:
        f = tmp_path / "g.json"
        f.write_text(json.dumps(TRIANGLE), encoding="utf-8")
        assert load_graph(f).edge_count == 3

    def test_explicit_format_overrides_suffix(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.txt"
        f.write_text("source,target\nA,B\n", encoding="utf-8")
        assert load_graph(f, fmt="csv").edge_count == 1

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        f = tmp_path / "g.csv"
        f.write_bytes(b"source,target\nA,\xff\n")
        with pytest.raises(GraphFormatError, match="not valid UTF-8"):
            load_graph(f)

    def test_unknown_format(self, tmp_path: Path) -> None:
        f = tmp_path / "g.yaml"
        f.write_text("", encoding="utf-8")
        with pytest.raises(GraphFormatError, match="unknown format"):
            load_graph(f)
