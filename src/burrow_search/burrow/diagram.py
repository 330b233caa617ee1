"""Text diagram parsing for burrow puzzles.

A diagram is the wall-drawn picture::

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

The second line holds the hallway between ``#`` walls. Every following line up
to the closing wall is one room row; room ``r`` sits in the column right below
its doorway. Rows read top-down, so the first room row is the slot next to the
hallway.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from burrow_search.burrow.config import EMPTY, BurrowConfig, canonical_config
from burrow_search.burrow.layout import Layout
from burrow_search.burrow.topology import validate_topology

UNFOLD_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")


class DiagramError(ValueError):
    """Raised for diagrams that do not describe a well-formed puzzle."""


@dataclass(frozen=True)
class Puzzle:
    """Parsed initial layout together with its instance configuration."""

    layout: Layout
    room_depth: int
    config: BurrowConfig


def parse_diagram(text: str, config: BurrowConfig | None = None) -> Puzzle:
    """Parse ``text`` into a :class:`Puzzle`, validating token counts."""

    config = config or canonical_config()
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[-1].strip():
        lines.pop()
    while lines and not lines[0].strip():
        lines.pop(0)
    if len(lines) < 4:
        msg = f"Diagram needs a wall, hallway, room rows and a floor; got {len(lines)} lines."
        raise DiagramError(msg)
    if set(lines[-1].strip()) != {"#"}:
        msg = f"Last diagram line must be a wall, got {lines[-1]!r}"
        raise DiagramError(msg)

    hallway = _parse_hallway(lines[1], config)
    room_rows = lines[2:-1]
    room_depth = len(room_rows)
    validate_topology(config, room_depth)

    columns: list[list[str]] = [[] for _ in range(config.num_rooms)]
    for row_idx, row in enumerate(room_rows):
        for room_idx in range(config.num_rooms):
            col = config.entry(room_idx) + 1
            if col >= len(row):
                msg = f"Room row {row_idx} is too short for room {room_idx}: {row!r}"
                raise DiagramError(msg)
            columns[room_idx].append(row[col])

    rooms = tuple(_parse_room(cells, config, room_idx) for room_idx, cells in enumerate(columns))
    layout = Layout(hallway, rooms)
    _check_counts(layout, config, room_depth)
    return Puzzle(layout=layout, room_depth=room_depth, config=config)


def unfold_diagram(text: str, rows: Sequence[str] = UNFOLD_ROWS) -> str:
    """Insert the folded-away ``rows`` below the first room row."""
    lines = text.strip("\n").splitlines()
    if len(lines) < 4:
        msg = "Diagram too short to unfold."
        raise DiagramError(msg)
    return "\n".join([*lines[:3], *rows, *lines[3:]]) + "\n"


def load_diagram(path: Path, config: BurrowConfig | None = None, *, unfold: bool = False) -> Puzzle:
    text = Path(path).expanduser().read_text()
    if unfold:
        text = unfold_diagram(text)
    return parse_diagram(text, config)


# --------------------------------------------------------------------------- #
# Helpers


def _parse_hallway(line: str, config: BurrowConfig) -> str:
    width = config.hallway_length
    if len(line) < width + 2 or line[0] != "#" or line[width + 1] != "#":
        msg = f"Hallway line must hold {width} cells between walls: {line!r}"
        raise DiagramError(msg)
    hallway = line[1 : width + 1]
    for pos, cell in enumerate(hallway):
        if cell != EMPTY and cell not in config.kinds:
            msg = f"Unknown token {cell!r} at hallway position {pos}"
            raise DiagramError(msg)
        if cell != EMPTY and pos in config.doorways:
            msg = f"Token {cell!r} blocks doorway at hallway position {pos}"
            raise DiagramError(msg)
    return hallway


def _parse_room(cells: list[str], config: BurrowConfig, room_idx: int) -> str:
    """Turn top-down cells into an innermost-first stack."""
    tokens: list[str] = []
    for cell in reversed(cells):
        if cell == EMPTY:
            tokens.append(cell)
            continue
        if cell not in config.kinds:
            msg = f"Unknown token {cell!r} in room {room_idx}"
            raise DiagramError(msg)
        tokens.append(cell)
    stack = "".join(tokens)
    # empty slots may only sit above the tokens
    filled = stack.rstrip(EMPTY)
    if EMPTY in filled:
        msg = f"Room {room_idx} has a gap below a token: {''.join(cells)!r}"
        raise DiagramError(msg)
    return filled


def _check_counts(layout: Layout, config: BurrowConfig, room_depth: int) -> None:
    counts = Counter(cell for cell in layout.hallway if cell != EMPTY)
    for room in layout.rooms:
        counts.update(room)
    for kind in config.kinds:
        if counts.get(kind, 0) != room_depth:
            msg = f"Expected {room_depth} tokens of kind {kind!r}, found {counts.get(kind, 0)}."
            raise DiagramError(msg)


__all__ = [
    "DiagramError",
    "Puzzle",
    "UNFOLD_ROWS",
    "load_diagram",
    "parse_diagram",
    "unfold_diagram",
]
