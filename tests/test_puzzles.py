from collections import Counter

import pytest

from burrow_search.benchmarks.puzzles import (
    ScrambleSpec,
    generate_scramble,
    puzzle_registry,
    puzzles_for,
    scramble_suite,
    scrambled_puzzle,
)
from burrow_search.burrow.config import canonical_config
from burrow_search.burrow.layout import hallway_is_clear


def test_registry_ids_and_depths():
    reg = puzzle_registry()
    assert {"example", "example_unfolded", "solved", "cramped_swap"} <= set(reg)
    assert reg["example"].puzzle.room_depth == 2
    assert reg["example_unfolded"].puzzle.room_depth == 4
    assert reg["cramped_swap"].config_id == "cramped"


def test_puzzles_for_rejects_unknown_ids():
    assert [p.name for p in puzzles_for(["solved", "example"])] == ["solved", "example"]
    with pytest.raises(KeyError):
        puzzles_for(["missing"])


def test_scrambles_are_deterministic_and_well_formed():
    config = canonical_config()
    first = scrambled_puzzle(config, 3, seed=42)
    second = scrambled_puzzle(config, 3, seed=42)
    assert first == second
    assert hallway_is_clear(first.layout)
    assert all(len(room) == 3 for room in first.layout.rooms)
    assert Counter("".join(first.layout.rooms)) == {kind: 3 for kind in config.kinds}


def test_scramble_suite_shapes_and_ids():
    suite = scramble_suite(seed=3)
    assert [p.name for p in suite] == ["twin_d1", "twin_d2", "twin_d3", "canonical_d1"]
    assert {p.puzzle.room_depth for p in suite} == {1, 2, 3}
    again = generate_scramble(ScrambleSpec("twin_d2", "twin", 2, 4))
    assert again.puzzle == suite[1].puzzle
