"""
Hex puzzle game module.

Provides core game logic: axial coordinates, cell state, constraint
rules, level descriptions, the board state machine and the hint engine.
"""
from .coord import AxialCoord, HEX_DIRECTIONS
from .cell import Cell, CellState, UNKNOWN_VALUE
from .rules import Rule, RuleKind, EdgeRule, GroupRule, SequenceRule
from .level import (
    ConfigurationError,
    LevelConfig,
    RuleSpec,
    EdgeRuleSpec,
    GroupRuleSpec,
    SequenceRuleSpec,
)
from .board import Board, GameState
from .hints import Hint, HintType, find_hint
from .levels import LEVEL_1, LEVEL_2, LEVEL_3, LEVELS, get_level
from .environment import HexcellsEnv

__all__ = [
    "AxialCoord",
    "HEX_DIRECTIONS",
    "Cell",
    "CellState",
    "UNKNOWN_VALUE",
    "Rule",
    "RuleKind",
    "EdgeRule",
    "GroupRule",
    "SequenceRule",
    "ConfigurationError",
    "LevelConfig",
    "RuleSpec",
    "EdgeRuleSpec",
    "GroupRuleSpec",
    "SequenceRuleSpec",
    "Board",
    "GameState",
    "Hint",
    "HintType",
    "find_hint",
    "LEVEL_1",
    "LEVEL_2",
    "LEVEL_3",
    "LEVELS",
    "get_level",
    "HexcellsEnv",
]
