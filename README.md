# routemaze

Two small path-finding toolkits in one package:

- **`routemaze.route`**: a directed graph of named locations whose edges
  carry a distance, a travel time and a cost. Routes are found with
  Dijkstra's algorithm and with A*. The graph is edited from an
  interactive console and stored as CSV files. The user's weighting
  preferences are kept in JSON.
- **`routemaze.maze`**: a grid maze generator (randomised depth-first
  search, Prim's and Kruskal's algorithms) and a solver (breadth-first,
  depth-first, backtracking, A*, or playing it yourself). Both can be
  animated in the terminal with curses.

No third-party libraries are needed. Animation uses the standard `curses`
module, which is available on Unix-like systems.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Route finding

### Interactive console

```
routemaze-route [--data-dir DIR]
```

The console reads three files from `DIR`, which is `data` by default:

- `location.csv`: a header line, then one `id,x,y` line per location
- `route.csv`: a header line, then one `from,to,distance,time,cost` line
  per directed edge
- `preference.json`: `{"weights": {"distance": …, "time": …, "cost": …}}`

When it loads these files, it skips lines that are too short, lines that
hold a bad number, repeated ids, and edges that name an unknown location.

The menu offers these actions:

- list the graph
- add, change and delete locations and edges; each change is written back
  to `location.csv` and `route.csv`
- render the graph with Graphviz
- go on to route search

Before each search you enter weights for distance, time and cost. Each
weight must lie between 0 and 1, and the three must add up to 1.0. They are
saved to `preference.json`. You then choose a start and a destination. The
console prints the route found by Dijkstra's algorithm and the route found
by A*, each with its total distance, time and cost, and says whether the
two routes are the same.

Log messages are printed to the console and appended to `transport.log`
in the current directory.

Rendering writes `graphviz_output.dot` in the current directory. It then
runs the Graphviz `dot` program to make `graphviz_output.png`, and opens
the image with the system viewer. Graphviz must be installed for this menu
entry to work.

### As a library

```python
from routemaze.route.graph import Graph, Vertex, Edge
from routemaze.route.preference import Preference
from routemaze.route.algorithms import (
    dijkstra_shortest_path,
    astar_path,
    path_distance,
    path_time,
    path_cost,
)

graph = Graph()
graph.add_vertex(Vertex("1", 0, 0))
graph.add_vertex(Vertex("2", 1, 1))
graph.add_vertex(Vertex("3", 2, 2))
graph.add_edge(Edge("1", "2", 10.0, 15.0, 20000.0))
graph.add_edge(Edge("2", "3", 5.0, 10.0, 15000.0))
graph.add_edge(Edge("1", "3", 20.0, 30.0, 30000.0))

path = dijkstra_shortest_path(graph, "1", "3", Preference())
print(path)                         # ['1', '2', '3']
print(path_distance(graph, path))   # 15.0
print(path_time(graph, path))       # 25.0
print(path_cost(graph, path))       # 35000.0

print(astar_path(graph, "1", "3"))
```

The two searches behave differently:

- `dijkstra_shortest_path` ranks edges by distance alone. It takes a
  `Preference` but does not use its weights. It returns an empty list when
  the goal cannot be reached.
- `astar_path` also ranks by distance. Its heuristic is the straight-line
  distance between vertex coordinates, scaled by 111. It raises
  `ValueError` for an unknown vertex and `NoPathError` when no path exists.

`path_total(graph, path, criteria)` sums a path under `"distance"`,
`"time"` or `"cost"`, or counts its hops under `"transfers"`.

`Graph` operations raise `GraphError` for missing or duplicate vertices
and edges.

The other modules are:

- `routemaze.route.storage`: `load_graph_from_csv`, `save_graph_to_csv`,
  `load_preferences` and `save_preferences`. These raise `StorageError`
  when a file cannot be read, written or parsed.
- `routemaze.route.preference`: `Preference` holds three weights that are
  always normalised to sum to one. `MultiCriteria` scores a mapping of
  named attributes against a set of named weights. Those weights can be
  loaded from `name,value` lines in a file.
- `routemaze.route.decision`: `DecisionTree` reads an indented file of
  `Q:question` and `A:answer->criteria` lines and walks it by asking the
  user.
- `routemaze.route.logger`: `Logger` writes coloured messages to the
  console and appends them to a log file.

## Mazes

### Generating

```
routemaze-generate --algorithm prims --rows 21 --cols 41 --file maze.txt
```

Options:

- `-a`, `--algorithm`: `dfs`, `prims` or `kruskals`. Without it, the
  command prints a message and does nothing. An unknown name falls back to
  `dfs`.
- `-r`, `--rows` and `-c`, `--cols`: the maze size. Even sizes are reduced
  by one. When omitted, the terminal size less two is used.
- `-f`, `--file`: write the finished maze to this file.
- `--animate`: draw the maze as it is carved, then wait for a key.
- `-s`, `--speed`: the delay between animation frames, in milliseconds.

The start `S` is at the top left and the end `E` is at the bottom right.
A maze file holds a line with the row and column counts, followed by the
grid: `#` for walls, a space for floor, `S` for the start and `E` for the
end.

### Solving

```
routemaze-solve --algorithm astar --infile maze.txt --outfile solved.txt --animate
```

Options:

- `-a`, `--algorithm`: `bt` (backtracking), `bfs`, `dfs`, `astar` or
  `play`. An unknown name falls back to `bt`.
- `-i`, `--infile`: the maze file to solve. Without both `--algorithm` and
  `--infile`, the command prints a message and does nothing.
- `-o`, `--outfile`: write the solved maze, with the path found marked by `.`.
- `--animate`: show the search in the terminal. Afterwards, click a floor
  square to move the start, or ctrl-click it to move the end, and the maze
  is solved again. Any other key ends.
- `-s`, `--speed`: the delay between animation frames, in milliseconds.
- `--diag`: allow diagonal moves. In A*, a diagonal step costs 1.4.

With `play`, which needs `--animate`, you move two squares at a time with
the arrow keys. Press `q` to quit.

From Python, use `Generator(rows, cols).generate(GenerateAlgorithm.KRUSKALS, animate=False)`
and `Solver(diag=False).solve(maze, SolveAlgorithm.BFS, animate=False)`.
`solve` returns whether the end was reached. Mazes are loaded and saved
with `Maze.from_file` and `Maze.save`.

## What it does not do

- Route search is offered only through the interactive console. There is
  no command that finds a route from command-line arguments alone.
- The route weights you enter are stored but do not change which route is
  chosen, because both searches rank by distance.