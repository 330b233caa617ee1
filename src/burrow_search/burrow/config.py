"""Fixed per-instance burrow configuration (kinds, costs, doorways, stops)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property, lru_cache
from typing import Dict, Iterable, Tuple

EMPTY = "."


@dataclass(frozen=True)
class BurrowConfig:
    """Token alphabet and hallway geometry shared by every layout of a puzzle.

    Kind ``kinds[i]`` lives in room ``i``, pays ``unit_costs[i]`` per step and
    enters its room through hallway cell ``doorways[i]``. ``hallway_stops``
    defaults to every non-doorway cell.
    """

    kinds: str = "ABCD"
    unit_costs: Tuple[int, ...] = (1, 10, 100, 1000)
    doorways: Tuple[int, ...] = (2, 4, 6, 8)
    hallway_length: int = 11
    hallway_stops: Tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        if not self.kinds:
            msg = "At least one token kind is required."
            raise ValueError(msg)
        if EMPTY in self.kinds or len(set(self.kinds)) != len(self.kinds):
            msg = f"Token kinds must be distinct and exclude '{EMPTY}': {self.kinds!r}"
            raise ValueError(msg)
        if len(self.unit_costs) != len(self.kinds) or len(self.doorways) != len(self.kinds):
            msg = "kinds, unit_costs and doorways must have the same length."
            raise ValueError(msg)
        if any(cost <= 0 for cost in self.unit_costs):
            msg = f"Unit costs must be strictly positive: {self.unit_costs}"
            raise ValueError(msg)
        if len(set(self.doorways)) != len(self.doorways):
            msg = f"Doorways must be distinct: {self.doorways}"
            raise ValueError(msg)
        for pos in self.doorways:
            if not 0 <= pos < self.hallway_length:
                msg = f"Doorway {pos} outside hallway of length {self.hallway_length}."
                raise ValueError(msg)
        if self.hallway_stops is not None:
            for pos in self.hallway_stops:
                if not 0 <= pos < self.hallway_length:
                    msg = f"Stop {pos} outside hallway of length {self.hallway_length}."
                    raise ValueError(msg)
                if pos in self.doorways:
                    msg = f"Stop {pos} sits in front of a doorway."
                    raise ValueError(msg)

    # ------------------------------------------------------------- derived --
    @property
    def num_rooms(self) -> int:
        return len(self.kinds)

    @cached_property
    def stops(self) -> Tuple[int, ...]:
        """Hallway cells where a token may come to rest."""
        if self.hallway_stops is not None:
            return tuple(sorted(self.hallway_stops))
        doorways = set(self.doorways)
        return tuple(pos for pos in range(self.hallway_length) if pos not in doorways)

    @property
    def empty_hallway(self) -> str:
        return EMPTY * self.hallway_length

    def home_room(self, kind: str) -> int:
        return self._kind_index[kind]

    def unit_cost(self, kind: str) -> int:
        return self.unit_costs[self._kind_index[kind]]

    def entry(self, room: int) -> int:
        """Hallway cell directly in front of ``room``."""
        return self.doorways[room]

    def home_entry(self, kind: str) -> int:
        return self.doorways[self._kind_index[kind]]

    @cached_property
    def _kind_index(self) -> Dict[str, int]:
        return {kind: idx for idx, kind in enumerate(self.kinds)}


def canonical_config() -> BurrowConfig:
    """Four kinds A-D, costs 1/10/100/1000, doorways 2/4/6/8 in an 11-wide hallway."""
    return BurrowConfig()


def _twin() -> BurrowConfig:
    return BurrowConfig(kinds="AB", unit_costs=(1, 10), doorways=(2, 4), hallway_length=7)


def _cramped() -> BurrowConfig:
    # A single stop between two doorways; swapped rooms deadlock.
    return BurrowConfig(kinds="AB", unit_costs=(1, 10), doorways=(0, 2), hallway_length=3)


@lru_cache(maxsize=1)
def config_registry() -> Dict[str, BurrowConfig]:
    """Return known burrow configurations keyed by id."""
    return {
        "canonical": canonical_config(),
        "twin": _twin(),
        "cramped": _cramped(),
    }


def configs_for(names: Iterable[str]) -> dict[str, BurrowConfig]:
    """Select a subset of registered configurations, raising on unknown ids."""
    reg = config_registry()
    selected: dict[str, BurrowConfig] = {}
    for name in names:
        if name not in reg:
            msg = f"Unknown burrow config id '{name}'"
            raise KeyError(msg)
        selected[name] = reg[name]
    return selected


__all__ = ["EMPTY", "BurrowConfig", "canonical_config", "config_registry", "configs_for"]
