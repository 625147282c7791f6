"""Interactive console for editing the route graph and finding routes."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import Callable, Sequence, TextIO

from .algorithms import astar_path, dijkstra_shortest_path, path_cost, path_distance, path_time
from .graph import Edge, Graph, Vertex
from .logger import Logger
from .preference import Preference
from .storage import load_graph_from_csv, load_preferences, save_preferences

PathLike = str | os.PathLike[str]


def write_graph_csv(graph: Graph, location_file: PathLike, route_file: PathLike) -> None:
    """Write the graph as ``id,x,y`` and ``from,to,distance,time,cost`` CSV files."""
    with open(location_file, "w", encoding="utf-8") as loc:
        loc.write("id,x,y\n")
        for v in graph.vertices():
            loc.write(f"{v.id},{v.latitude:g},{v.longitude:g}\n")
    with open(route_file, "w", encoding="utf-8") as route:
        route.write("from,to,distance,time,cost\n")
        for e in graph.edges():
            route.write(f"{e.source},{e.destination},{e.distance:g},{e.time:g},{e.cost:g}\n")


def format_path(graph: Graph, path: Sequence[str]) -> str:
    """Render a path as a numbered list, five stops per line."""
    parts = ["\nRecommended Route:\n", "=================\n"]
    last = len(path) - 1
    for number, vertex_id in enumerate(path, start=1):
        parts.append(f"{number}. {graph.vertex(vertex_id).id} ")
        if number - 1 < last:
            parts.append("-> ")
        if number % 5 == 0:
            parts.append("\n")
    parts.append("\n\n")
    return "".join(parts)


def format_path_details(graph: Graph, path: Sequence[str]) -> str:
    """Render the distance, time and cost totals of a path."""
    return (
        "Path Details:\n"
        "============\n"
        f"Total Distance: {path_distance(graph, path):g} km\n"
        f"Total Time: {path_time(graph, path):g} minutes\n"
        f"Total Cost: ${path_cost(graph, path):g}\n\n"
    )


def graph_to_dot(graph: Graph) -> str:
    """Return the graph in Graphviz DOT form."""
    lines = ["digraph G {\n"]
    for v in graph.vertices():
        lines.append(f'  "{v.id}" [label="{v.id}\n({v.latitude:g},{v.longitude:g})"]\n')
    for e in graph.edges():
        lines.append(
            f'  "{e.source}" -> "{e.destination}" [label="Jarak: {e.distance:g}'
            f'\\nWaktu: {e.time:g}\\nBiaya: {e.cost:g}"]\n'
        )
    lines.append("}\n")
    return "".join(lines)


def export_graph_to_dot(graph: Graph, filename: PathLike) -> None:
    """Write the graph to a DOT file."""
    Path(filename).write_text(graph_to_dot(graph), encoding="utf-8")


def _open_image(filename: str) -> None:
    if sys.platform.startswith("linux"):
        command = ["xdg-open", filename]
    elif sys.platform == "win32":
        command = ["cmd", "/c", "start", "", filename]
    elif sys.platform == "darwin":
        command = ["open", filename]
    else:
        return
    try:
        subprocess.Popen(command)
    except OSError:
        pass


def visualize_graph(
    graph: Graph,
    dot_file: PathLike = "graphviz_output.dot",
    png_file: PathLike = "graphviz_output.png",
) -> bool:
    """Render the graph to PNG with Graphviz and open it; return whether rendering worked."""
    export_graph_to_dot(graph, dot_file)
    try:
        result = subprocess.run(
            ["dot", "-Tpng", str(dot_file), "-o", str(png_file)], check=False
        )
    except OSError:
        return False
    if result.returncode != 0:
        return False
    _open_image(str(png_file))
    return True


def save_preference_json(preferences: Preference, filename: PathLike) -> None:
    """Write the preference weights to a JSON file."""
    save_preferences(preferences, filename)


class _Session:
    """One interactive session over a graph and its data files."""

    def __init__(self, graph, preferences, data_dir, input_func, output):
        self.graph = graph
        self.preferences = preferences
        data = Path(data_dir)
        self.location_file = data / "location.csv"
        self.route_file = data / "route.csv"
        self.preference_file = data / "preference.json"
        self.input_func = input_func
        self.out = output

    def say(self, text: str) -> None:
        self.out.write(text)

    def ask(self, prompt: str) -> str:
        words = self.input_func(prompt).split()
        return words[0] if words else ""

    def ask_float(self, prompt: str) -> float | None:
        try:
            return float(self.ask(prompt))
        except ValueError:
            return None

    def ask_floats(self, *prompts: str) -> list[float] | None:
        values = []
        for prompt in prompts:
            value = self.ask_float(prompt)
            if value is None:
                self.say("Input tidak valid!\n")
                return None
            values.append(value)
        return values

    def save_graph(self) -> None:
        write_graph_csv(self.graph, self.location_file, self.route_file)
        self.say(
            f"Graph berhasil disimpan ke {self.location_file} dan {self.route_file}\n"
        )

    # CRUD actions

    def show_graph(self) -> None:
        self.say("\nDaftar Vertex:\n")
        for v in self.graph.vertices():
            self.say(f"{v.id} ({v.latitude:g}, {v.longitude:g})\n")
        self.say("\nDaftar Edge:\n")
        for e in self.graph.edges():
            self.say(
                f"{e.source} -> {e.destination} | Jarak: {e.distance:g}"
                f" | Waktu: {e.time:g} | Biaya: {e.cost:g}\n"
            )

    def add_vertex(self) -> None:
        vertex_id = self.ask("Masukkan ID vertex (string): ")
        coords = self.ask_floats("Masukkan koordinat x: ", "Masukkan koordinat y: ")
        if coords is None:
            return
        self.graph.add_vertex(Vertex(vertex_id, *coords))
        self.say("Vertex berhasil ditambahkan!\n")
        self.save_graph()

    def edit_vertex(self) -> None:
        vertex_id = self.ask("Masukkan ID vertex yang ingin diubah: ")
        if not self.graph.has_vertex(vertex_id):
            self.say("Vertex tidak ditemukan!\n")
            return
        coords = self.ask_floats("Masukkan koordinat x baru: ", "Masukkan koordinat y baru: ")
        if coords is None:
            return
        self.graph.remove_vertex(vertex_id)
        self.graph.add_vertex(Vertex(vertex_id, *coords))
        self.say("Vertex berhasil diubah!\n")
        self.save_graph()

    def delete_vertex(self) -> None:
        vertex_id = self.ask("Masukkan ID vertex yang ingin dihapus: ")
        if not self.graph.has_vertex(vertex_id):
            self.say("Vertex tidak ditemukan!\n")
            return
        self.graph.remove_vertex(vertex_id)
        self.say("Vertex berhasil dihapus!\n")
        self.save_graph()

    def add_edge(self) -> None:
        source = self.ask("Masukkan ID asal: ")
        destination = self.ask("Masukkan ID tujuan: ")
        weights = self.ask_floats("Masukkan jarak: ", "Masukkan waktu: ", "Masukkan biaya: ")
        if weights is None:
            return
        self.graph.add_edge(Edge(source, destination, *weights))
        self.say("Edge berhasil ditambahkan!\n")
        self.save_graph()

    def edit_edge(self) -> None:
        source = self.ask("Masukkan ID asal edge yang ingin diubah: ")
        destination = self.ask("Masukkan ID tujuan edge yang ingin diubah: ")
        if not self.graph.has_edge(source, destination):
            self.say("Edge tidak ditemukan!\n")
            return
        self.graph.remove_edge(source, destination)
        weights = self.ask_floats(
            "Masukkan jarak baru: ", "Masukkan waktu baru: ", "Masukkan biaya baru: "
        )
        if weights is None:
            return
        self.graph.add_edge(Edge(source, destination, *weights))
        self.say("Edge berhasil diubah!\n")
        self.save_graph()

    def delete_edge(self) -> None:
        source = self.ask("Masukkan ID asal edge yang ingin dihapus: ")
        destination = self.ask("Masukkan ID tujuan edge yang ingin dihapus: ")
        if not self.graph.has_edge(source, destination):
            self.say("Edge tidak ditemukan!\n")
            return
        self.graph.remove_edge(source, destination)
        self.say("Edge berhasil dihapus!\n")
        self.save_graph()

    def visualize(self) -> None:
        png_file = "graphviz_output.png"
        if visualize_graph(self.graph, "graphviz_output.dot", png_file):
            self.say(f"Graph image generated: {png_file}\n")
        else:
            self.say("Gagal menjalankan Graphviz. Pastikan 'dot' sudah terinstall.\n")

    def crud_menu(self) -> bool:
        """Run the editing menu; False means the user chose to quit."""
        actions = {
            1: self.show_graph,
            2: self.add_vertex,
            3: self.edit_vertex,
            4: self.delete_vertex,
            5: self.add_edge,
            6: self.edit_edge,
            7: self.delete_edge,
            9: self.visualize,
        }
        while True:
            self.say(
                "\n==== MENU CRUD GRAPH ====\n"
                "1. Tampilkan graph\n"
                "2. Tambah vertex\n"
                "3. Ubah vertex\n"
                "4. Hapus vertex\n"
                "5. Tambah edge\n"
                "6. Ubah edge\n"
                "7. Hapus edge\n"
                "8. Lanjut ke pencarian rute\n"
                "9. Visualisasikan graph\n"
                "0. Keluar\n"
            )
            try:
                choice = int(self.ask("Pilih menu: "))
            except ValueError:
                choice = -1
            if choice == 0:
                self.say("Keluar aplikasi.\n")
                return False
            if choice == 8:
                return True
            action = actions.get(choice)
            if action is None:
                self.say("Menu tidak valid!\n")
            else:
                action()

    def ask_preferences(self) -> None:
        while True:
            self.say("\nMasukkan preferensi anda (total harus 1.0):\n")
            weights = [
                self.ask_float("Bobot jarak   (0-1): "),
                self.ask_float("Bobot waktu   (0-1): "),
                self.ask_float("Bobot biaya   (0-1): "),
            ]
            if any(w is None or not 0 <= w <= 1 for w in weights):
                self.say("Input tidak valid! Masukkan angka antara 0 dan 1.\n")
                continue
            if abs(sum(weights) - 1.0) > 1e-6:
                self.say("Total bobot harus 1.0! Ulangi input.\n")
                continue
            break
        w_dist, w_time, w_cost = weights
        self.preferences.distance_weight = w_dist
        self.preferences.time_weight = w_time
        self.preferences.cost_weight = w_cost
        save_preference_json(self.preferences, self.preference_file)
        self.say(f"Preferensi berhasil disimpan ke {self.preference_file}\n")

    def ask_locations(self) -> tuple[str, str]:
        while True:
            self.say("\nAvailable locations:\n")
            self.say("".join(f"{v.id} " for v in self.graph.vertices()))
            self.say("\n\n")
            start = self.ask("Enter start location: ")
            goal = self.ask("Enter destination: ")
            if not self.graph.has_vertex(start) or not self.graph.has_vertex(goal):
                self.say("Lokasi tidak ditemukan! Ulangi input.\n")
                continue
            if start == goal:
                self.say("Lokasi asal dan tujuan tidak boleh sama!\n")
                continue
            return start, goal

    def find_routes(self, start: str, goal: str) -> None:
        self.say("\nFinding optimal route...\n")
        dijkstra: list[str] = []
        astar: list[str] = []
        try:
            dijkstra = dijkstra_shortest_path(self.graph, start, goal, self.preferences)
            self.say("\nDijkstra's Algorithm Result:\n")
            self.say(format_path(self.graph, dijkstra))
            self.say(format_path_details(self.graph, dijkstra))
        except Exception as exc:  # any failure of one search is reported, not fatal
            self.say(f"Error Dijkstra: {exc}\n")
        try:
            astar = astar_path(self.graph, start, goal)
            self.say("\nA* Algorithm Result:\n")
            self.say(format_path(self.graph, astar))
            self.say(format_path_details(self.graph, astar))
        except Exception as exc:
            self.say(f"Error A*: {exc}\n")
        if dijkstra and astar:
            if dijkstra == astar:
                self.say("Both algorithms found the same optimal path!\n")
            else:
                self.say(
                    "Algorithms found different paths. This might be due to different "
                    "heuristics or weighting strategies.\n"
                )


def run(
    graph: Graph,
    preferences: Preference,
    data_dir: PathLike = "data",
    input_func: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> int:
    """Run the interactive menu until the user quits or input ends; return the exit code."""
    session = _Session(
        graph, preferences, data_dir, input_func, output if output is not None else sys.stdout
    )
    try:
        while session.crud_menu():
            session.ask_preferences()
            start, goal = session.ask_locations()
            session.find_routes(start, goal)
    except EOFError:
        pass
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Load the data files and start the interactive console."""
    parser = argparse.ArgumentParser(description="Find routes between locations.")
    parser.add_argument("--data-dir", default="data", help="directory of the data files")
    args = parser.parse_args(argv)
    data = Path(args.data_dir)

    logger = Logger()
    try:
        logger.info("Application started")
        print("Loading graph data...")
        graph = load_graph_from_csv(data / "location.csv", data / "route.csv")
        logger.info("Graph data loaded successfully")
        print("Loading user preferences...")
        preferences = load_preferences(data / "preference.json")
        logger.info("User preferences loaded successfully")
        code = run(graph, preferences, data)
        logger.info("Path finding completed successfully")
        return code
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        logger.error(f"Application error: {exc}")
        return 1