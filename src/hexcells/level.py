"""
Level description consumed by Board.initialize.

A level is already parsed when it gets here: grid size, mine
coordinates, optional pre-revealed cells and the rule specifications.
Reading and writing level files is handled elsewhere.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

from .coord import AxialCoord
from .rules import EdgeRule, GroupRule, Rule, SequenceRule, freeze_coords


# ============================================================================
# Errors
# ============================================================================

class ConfigurationError(ValueError):
    """Raised when a level description cannot be used to start a game."""


# ============================================================================
# Rule Specifications
# ============================================================================

class RuleSpec(ABC):
    """Parsed description of one rule, turned into a Rule by build()."""

    @abstractmethod
    def build(self) -> Rule:
        """Create the rule this specification describes."""


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ConfigurationError(f"{name} cannot be negative: {value}")


def _coords(values: Iterable[Tuple[int, int]]) -> Tuple[AxialCoord, ...]:
    try:
        return freeze_coords(values)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


@dataclass(frozen=True)
class SequenceRuleSpec(RuleSpec):
    """Ordered cells with the expected longest run of mines."""

    cells: Tuple[AxialCoord, ...]
    expected_consecutive_mines: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", _coords(self.cells))
        _check_count("expected_consecutive_mines", self.expected_consecutive_mines)
        if self.expected_consecutive_mines > len(self.cells):
            raise ConfigurationError(
                f"Sequence of {len(self.cells)} cells cannot hold a run of "
                f"{self.expected_consecutive_mines} mines"
            )

    def build(self) -> Rule:
        return SequenceRule(self.cells, self.expected_consecutive_mines)


@dataclass(frozen=True)
class GroupRuleSpec(RuleSpec):
    """Unordered cells with the expected number of mines among them."""

    cells: Tuple[AxialCoord, ...]
    expected_grouped_mines: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", _coords(self.cells))
        _check_count("expected_grouped_mines", self.expected_grouped_mines)
        if self.expected_grouped_mines > len(set(self.cells)):
            raise ConfigurationError(
                f"Group of {len(set(self.cells))} cells cannot hold "
                f"{self.expected_grouped_mines} mines"
            )

    def build(self) -> Rule:
        return GroupRule(self.cells, self.expected_grouped_mines)


@dataclass(frozen=True)
class EdgeRuleSpec(RuleSpec):
    """Anchor cell with the expected number of mines around it."""

    cell: AxialCoord
    expected_neighbor_mines: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "cell", _coords([self.cell])[0])
        _check_count("expected_neighbor_mines", self.expected_neighbor_mines)
        if self.expected_neighbor_mines > 6:
            raise ConfigurationError(
                f"A hex cell has 6 neighbors, not {self.expected_neighbor_mines}"
            )

    def build(self) -> Rule:
        return EdgeRule(self.cell, self.expected_neighbor_mines)


# ============================================================================
# Level Configuration
# ============================================================================

@dataclass
class LevelConfig:
    """
    Configuration for a single puzzle level.

    Attributes:
        rows: Number of rows (r axis).
        cols: Number of columns (q axis).
        mines: Mine coordinates. Duplicates are tolerated.
        rules: Rule specifications, in the order the hint engine tries them.
        revealed: Cells that start the level already revealed.
        name: Display name.
    """

    rows: int
    cols: int
    mines: Optional[Sequence[Tuple[int, int]]]
    rules: Optional[Sequence[RuleSpec]]
    revealed: Sequence[Tuple[int, int]] = field(default_factory=tuple)
    name: str = "custom"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()
        self.mines = _coords(self.mines)
        self.rules = tuple(self.rules)
        self.revealed = _coords(self.revealed)

        # Mines stay hidden so that every one of them can be flagged
        revealed_mines = self.mine_set.intersection(self.revealed)
        if revealed_mines:
            raise ConfigurationError(
                "Pre-revealed cells cannot be mines: "
                + ", ".join(str(coord) for coord in sorted(revealed_mines))
            )

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows <= 0 or self.cols <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive: rows={self.rows}, cols={self.cols}"
            )
        if self.mines is None:
            raise ConfigurationError("Mine list is required")
        if self.rules is None:
            raise ConfigurationError("Rule list is required")
        for spec in self.rules:
            if not isinstance(spec, RuleSpec):
                raise ConfigurationError(f"Not a rule specification: {spec!r}")

    @property
    def mine_set(self) -> frozenset:
        """Distinct mine coordinates."""
        return frozenset(self.mines)

    def build_rules(self) -> Tuple[Rule, ...]:
        """Create one Rule per specification, in order."""
        return tuple(spec.build() for spec in self.rules)

    def contains(self, coord: AxialCoord) -> bool:
        """Check if a coordinate lies inside this level's grid."""
        return 0 <= coord.q < self.cols and 0 <= coord.r < self.rows

    def out_of_range(self, coords: Iterable[AxialCoord]) -> Tuple[AxialCoord, ...]:
        """Coordinates from coords that fall outside the grid."""
        return tuple(coord for coord in coords if not self.contains(coord))
