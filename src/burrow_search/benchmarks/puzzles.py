"""Named benchmark puzzles and deterministic synthetic scrambles."""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, List

from burrow_search.burrow.config import BurrowConfig, canonical_config, config_registry
from burrow_search.burrow.diagram import Puzzle, parse_diagram, unfold_diagram
from burrow_search.burrow.layout import Layout

EXAMPLE_DIAGRAM = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""

SOLVED_DIAGRAM = """\
#############
#...........#
###A#B#C#D###
  #A#B#C#D#
  #########
"""

CRAMPED_SWAP_DIAGRAM = """\
#####
#...#
#A#B#
#B#A#
#####
"""


@dataclass(frozen=True)
class NamedPuzzle:
    """A registry entry: parsed puzzle plus its identifiers."""

    name: str
    config_id: str
    puzzle: Puzzle


@dataclass(frozen=True)
class ScrambleSpec:
    """Specification of a synthetic scrambled puzzle."""

    name: str
    config_id: str
    room_depth: int
    seed: int


def scrambled_puzzle(config: BurrowConfig, room_depth: int, seed: int) -> Puzzle:
    """Shuffle ``room_depth`` tokens of each kind into the rooms; hallway left empty."""
    rng = random.Random(seed)
    tokens = [kind for kind in config.kinds for _ in range(room_depth)]
    rng.shuffle(tokens)
    rooms = tuple(
        "".join(tokens[idx * room_depth : (idx + 1) * room_depth])
        for idx in range(config.num_rooms)
    )
    layout = Layout(config.empty_hallway, rooms)
    return Puzzle(layout=layout, room_depth=room_depth, config=config)


def generate_scramble(spec: ScrambleSpec) -> NamedPuzzle:
    config = config_registry()[spec.config_id]
    puzzle = scrambled_puzzle(config, spec.room_depth, spec.seed)
    return NamedPuzzle(spec.name, spec.config_id, puzzle)


def scramble_suite(seed: int = 0) -> List[NamedPuzzle]:
    """Return a small suite of scrambles that solve in well under a second each."""
    specs: Iterable[ScrambleSpec] = [
        ScrambleSpec("twin_d1", "twin", 1, seed),
        ScrambleSpec("twin_d2", "twin", 2, seed + 1),
        ScrambleSpec("twin_d3", "twin", 3, seed + 2),
        ScrambleSpec("canonical_d1", "canonical", 1, seed + 3),
    ]
    return [generate_scramble(spec) for spec in specs]


@lru_cache(maxsize=1)
def puzzle_registry() -> Dict[str, NamedPuzzle]:
    """Return hand-written puzzles keyed by id."""
    canonical = canonical_config()
    cramped = config_registry()["cramped"]
    return {
        "example": NamedPuzzle("example", "canonical", parse_diagram(EXAMPLE_DIAGRAM, canonical)),
        "example_unfolded": NamedPuzzle(
            "example_unfolded",
            "canonical",
            parse_diagram(unfold_diagram(EXAMPLE_DIAGRAM), canonical),
        ),
        "solved": NamedPuzzle("solved", "canonical", parse_diagram(SOLVED_DIAGRAM, canonical)),
        "cramped_swap": NamedPuzzle(
            "cramped_swap", "cramped", parse_diagram(CRAMPED_SWAP_DIAGRAM, cramped)
        ),
    }


def puzzles_for(names: Iterable[str]) -> list[NamedPuzzle]:
    """Select registered puzzles by id, raising on unknown ids."""
    reg = puzzle_registry()
    selected: list[NamedPuzzle] = []
    for name in names:
        if name not in reg:
            msg = f"Unknown puzzle id '{name}'"
            raise KeyError(msg)
        selected.append(reg[name])
    return selected


__all__ = [
    "CRAMPED_SWAP_DIAGRAM",
    "EXAMPLE_DIAGRAM",
    "NamedPuzzle",
    "SOLVED_DIAGRAM",
    "ScrambleSpec",
    "generate_scramble",
    "puzzle_registry",
    "puzzles_for",
    "scramble_suite",
    "scrambled_puzzle",
]
