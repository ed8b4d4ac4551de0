"""Read a Graph from a JSON or CSV edge list.

JSON:
    {"nodes": ["A", "B", "C", "D"],
     "edges": [{"source": "A", "target": "B", "weight": 1}, ...]}
"nodes" is optional and only needed for isolated nodes.  Every key of
an edge object other than source/target becomes an edge attribute.

CSV:
    source,target,weight
    A,B,1
    B,C,
Columns other than source/target become attributes; empty cells are
left out, so the B -> C edge above has no weight.  Values stay strings
and are parsed on demand by Edge.get_number.
"""
from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any, Hashable, Iterable

from dagpath.graph.adjacency import Graph

FORMATS = ("json", "csv")


class GraphFormatError(ValueError):
    """Raised when an input file cannot be turned into a graph."""


def load_graph(path: str | Path, fmt: str | None = None) -> Graph[Hashable]:
    """Load *path*, picking the format from *fmt* or the file suffix."""
    path = Path(path)
    fmt = fmt or path.suffix.lstrip(".").lower()
    if fmt not in FORMATS:
        raise GraphFormatError(
            f"{path}: unknown format {fmt!r}, expected one of {', '.join(FORMATS)}"
        )
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{path}: not valid UTF-8: {exc}") from exc
    if fmt == "json":
        return parse_json(text, source=str(path))
    return parse_csv(io.StringIO(text, newline=""), source=str(path))


def parse_json(text: str, source: str = "<string>") -> Graph[Hashable]:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"{source}: invalid JSON: {exc}") from exc
    if not isinstance(doc, dict):
        raise GraphFormatError(f"{source}: top level must be an object")
    nodes = doc.get("nodes", [])
    edges = doc.get("edges", [])
    for key, value in (("nodes", nodes), ("edges", edges)):
        if not isinstance(value, list):
            raise GraphFormatError(f"{source}: {key!r} must be a list")

    g: Graph[Hashable] = Graph()
    for i, node in enumerate(nodes):
        g.add_node(_node(node, source, f"nodes[{i}]"))
    for i, record in enumerate(edges):
        where = f"edges[{i}]"
        if not isinstance(record, dict):
            raise GraphFormatError(f"{source}: {where} must be an object")
        attrs = dict(record)
        src, dst = _endpoints(attrs, source, where)
        g.add_edge(_node(src, source, where), _node(dst, source, where), **attrs)
    return g


def parse_csv(lines: Iterable[str], source: str = "<string>") -> Graph[Hashable]:
    reader = csv.DictReader(lines)
    fields = reader.fieldnames or []
    if "source" not in fields or "target" not in fields:
        raise GraphFormatError(f"{source}: header must name source and target")

    g: Graph[Hashable] = Graph()
    for row in reader:
        where = f"line {reader.line_num}"
        attrs = {k: v for k, v in row.items() if k is not None and v not in (None, "")}
        src, dst = _endpoints(attrs, source, where)
        g.add_edge(src, dst, **attrs)
    return g


def _endpoints(attrs: dict[str, Any], source: str, where: str) -> tuple[Any, Any]:
    try:
        return attrs.pop("source"), attrs.pop("target")
    except KeyError as exc:
        raise GraphFormatError(f"{source}: {where} is missing {exc.args[0]!r}") from None


def _node(value: Any, source: str, where: str) -> Hashable:
    if isinstance(value, (dict, list)):
        raise GraphFormatError(f"{source}: {where} node id must be a scalar")
    return value
