"""Reading and writing route graphs as CSV and user preferences as JSON."""

from __future__ import annotations

import json
import os
import re

from .graph import Edge, Graph, GraphError, Vertex
from .preference import Preference

_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

PathLike = str | os.PathLike[str]


class StorageError(RuntimeError):
    """Raised when a data file cannot be opened, written or understood."""


def _to_float(text: str) -> float:
    """Read the leading number of ``text``; trailing characters are ignored."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def parse_csv_line(line: str) -> list[str]:
    """Split a line on commas and trim spaces and tabs from each field.

    An empty line gives no fields, and a trailing comma adds no empty field.
    """
    parts = line.split(",")
    if parts[-1] == "":
        parts.pop()
    return [part.strip(" \t") for part in parts]


def _data_lines(handle):
    next(handle, None)  # header
    for raw in handle:
        yield parse_csv_line(raw.rstrip("\n"))


def load_graph_from_csv(location_file: PathLike, route_file: PathLike) -> Graph:
    """Build a graph from a location file (id, x, y) and a route file.

    Each file starts with a header line. Lines that are short, hold a bad
    number, repeat a vertex id, or name an unknown vertex are skipped.
    """
    graph = Graph()

    try:
        with open(location_file, encoding="utf-8") as handle:
            for tokens in _data_lines(handle):
                if len(tokens) < 3:
                    continue
                try:
                    graph.add_vertex(
                        Vertex(tokens[0], _to_float(tokens[1]), _to_float(tokens[2]))
                    )
                except (ValueError, GraphError):
                    continue
    except OSError:
        raise StorageError(f"Cannot open location file: {location_file}") from None

    try:
        with open(route_file, encoding="utf-8") as handle:
            for tokens in _data_lines(handle):
                if len(tokens) < 5:
                    continue
                try:
                    source, dest = tokens[0], tokens[1]
                    distance, time, cost = (_to_float(t) for t in tokens[2:5])
                except ValueError:
                    continue
                if graph.has_vertex(source) and graph.has_vertex(dest):
                    graph.add_edge(Edge(source, dest, distance, time, cost))
    except OSError:
        raise StorageError(f"Cannot open route file: {route_file}") from None

    return graph


def save_graph_to_csv(graph: Graph, location_file: PathLike, route_file: PathLike) -> None:
    """Write the vertices and edges of ``graph`` to two CSV files with headers."""
    try:
        with open(location_file, "w", encoding="utf-8") as handle:
            handle.write("ID,Latitude,Longitude\n")
            for v in graph.vertices():
                handle.write(f"{v.id},{v.latitude:g},{v.longitude:g}\n")
    except OSError:
        raise StorageError(
            f"Cannot open location file for writing: {location_file}"
        ) from None

    try:
        with open(route_file, "w", encoding="utf-8") as handle:
            handle.write("Source,Destination,Distance,Time,Cost\n")
            for e in graph.edges():
                handle.write(
                    f"{e.source},{e.destination},{e.distance:g},{e.time:g},{e.cost:g}\n"
                )
    except OSError:
        raise StorageError(f"Cannot open route file for writing: {route_file}") from None


def _weight(weights: object, name: str) -> float:
    if not isinstance(weights, dict):
        raise StorageError("Error parsing JSON: 'weights' is not an object")
    if name not in weights:
        raise StorageError(f"Error parsing JSON: missing weight '{name}'")
    value = weights[name]
    if not isinstance(value, (int, float)):
        raise StorageError(f"Error parsing JSON: weight '{name}' is not a number")
    return float(value)


def load_preferences(filename: PathLike) -> Preference:
    """Read ``{"weights": {"distance", "time", "cost"}}`` into a normalised preference."""
    try:
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        raise StorageError(f"Cannot open preferences file: {filename}") from None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StorageError(f"Error parsing JSON: {exc}") from None
    if not isinstance(data, dict) or "weights" not in data:
        raise StorageError("Error parsing JSON: missing 'weights'")
    weights = data["weights"]
    return Preference(
        _weight(weights, "distance"),
        _weight(weights, "time"),
        _weight(weights, "cost"),
    )


def preferences_to_json(preferences: Preference) -> str:
    """Return the preference weights as JSON indented by four spaces."""
    payload = {
        "weights": {
            "distance": preferences.distance_weight,
            "time": preferences.time_weight,
            "cost": preferences.cost_weight,
        }
    }
    return json.dumps(payload, indent=4, sort_keys=True)


def save_preferences(preferences: Preference, filename: PathLike) -> None:
    """Write the preference weights to a JSON file."""
    try:
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(preferences_to_json(preferences))
    except OSError:
        raise StorageError(f"Cannot open file for writing: {filename}") from None