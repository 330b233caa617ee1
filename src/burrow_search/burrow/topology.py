"""Burrow cells as a networkx graph (hallway line plus one shaft per room)."""

from __future__ import annotations

from typing import Tuple

import networkx as nx

from burrow_search.burrow.config import BurrowConfig

Cell = Tuple


def hall_cell(pos: int) -> Cell:
    return ("hall", pos)


def room_cell(room: int, depth: int) -> Cell:
    """Cell ``depth`` of ``room``; depth 0 touches the inner wall."""
    return ("room", room, depth)


def burrow_graph(config: BurrowConfig, room_depth: int) -> nx.Graph:
    """Return the unit-length cell graph for ``config`` with rooms ``room_depth`` deep."""
    if room_depth < 1:
        msg = f"room_depth must be positive, got {room_depth}"
        raise ValueError(msg)
    g = nx.Graph()
    g.add_nodes_from(hall_cell(pos) for pos in range(config.hallway_length))
    for pos in range(config.hallway_length - 1):
        g.add_edge(hall_cell(pos), hall_cell(pos + 1))
    for room in range(config.num_rooms):
        # top slot of the shaft opens onto the doorway cell
        g.add_edge(room_cell(room, room_depth - 1), hall_cell(config.entry(room)))
        for depth in range(room_depth - 1):
            g.add_edge(room_cell(room, depth), room_cell(room, depth + 1))
    return g


def walk_length(graph: nx.Graph, src: Cell, dst: Cell) -> int:
    """Number of unit steps between two cells."""
    return int(nx.shortest_path_length(graph, src, dst))


def validate_topology(config: BurrowConfig, room_depth: int) -> nx.Graph:
    """Build the burrow graph and reject layouts no token could ever leave."""
    graph = burrow_graph(config, room_depth)
    if not nx.is_connected(graph):
        msg = f"Burrow with kinds {config.kinds!r} is not connected."
        raise ValueError(msg)
    if not config.stops:
        msg = "Burrow has no hallway stops; no room could ever be emptied."
        raise ValueError(msg)
    return graph


__all__ = ["Cell", "burrow_graph", "hall_cell", "room_cell", "validate_topology", "walk_length"]
