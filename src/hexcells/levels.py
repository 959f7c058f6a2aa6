"""
Built-in levels.

Small hand-made puzzles that ship with the game. Every rule here agrees
with its level's mine layout.
"""
from typing import Dict

from .level import EdgeRuleSpec, GroupRuleSpec, LevelConfig, SequenceRuleSpec


LEVEL_1 = LevelConfig(
    rows=3,
    cols=4,
    mines=[(1, 0), (2, 2)],
    rules=[
        EdgeRuleSpec((1, 1), 1),
        GroupRuleSpec([(3, 0), (3, 1), (3, 2)], 0),
        SequenceRuleSpec([(0, 2), (1, 2), (2, 2), (3, 2)], 1),
    ],
    revealed=[(0, 0)],
    name="level 1",
)

LEVEL_2 = LevelConfig(
    rows=4,
    cols=4,
    mines=[(0, 1), (2, 1), (3, 3), (1, 3)],
    rules=[
        SequenceRuleSpec([(0, 3), (1, 3), (2, 3), (3, 3)], 1),
        GroupRuleSpec([(0, 1), (1, 1), (2, 1), (3, 1)], 2),
        EdgeRuleSpec((1, 2), 2),
    ],
    revealed=[(3, 0)],
    name="level 2",
)

LEVEL_3 = LevelConfig(
    rows=5,
    cols=5,
    mines=[(1, 1), (2, 1), (3, 1), (0, 4), (4, 3), (2, 3)],
    rules=[
        SequenceRuleSpec([(0, 1), (1, 1), (2, 1), (3, 1), (4, 1)], 3),
        EdgeRuleSpec((2, 2), 3),
        GroupRuleSpec([(0, 4), (1, 4), (2, 4), (3, 4), (4, 4)], 1),
        GroupRuleSpec([(4, 0), (4, 2), (4, 3), (4, 4)], 1),
        EdgeRuleSpec((0, 0), 0),
    ],
    revealed=[(0, 2)],
    name="level 3",
)

LEVELS: Dict[int, LevelConfig] = {
    1: LEVEL_1,
    2: LEVEL_2,
    3: LEVEL_3,
}


def get_level(number: int) -> LevelConfig:
    """Look up a built-in level by number."""
    try:
        return LEVELS[number]
    except KeyError:
        raise KeyError(
            f"Unknown level {number}; choose from {sorted(LEVELS)}"
        ) from None
