"""
Life Struggle cell rules

The rule is evaluated on the full 3x3 window around a cell, the cell itself
included. A dead cell is born when the window holds exactly 3 live cells; a
live cell survives when the window holds 3 or 4 (itself plus 2 or 3 others).
"""

from typing import Dict, Set, Tuple

import numpy as np


# Totals over the 3x3 window, centre cell included
SURVIVAL_TOTALS: Set[int] = {3, 4}
BIRTH_TOTALS: Set[int] = {3}


def update_cell(alive: bool, window_total: int) -> bool:
    """Apply the window rule to a single cell.

    Args:
        alive: Current cell state (True=alive, False=dead)
        window_total: Live cells in the 3x3 window, centre included (0-9)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return window_total in SURVIVAL_TOTALS
    else:
        return window_total in BIRTH_TOTALS


def apply_rule(alive: np.ndarray, window_totals: np.ndarray) -> np.ndarray:
    """Vectorized `update_cell` over whole arrays.

    Args:
        alive: Boolean array of current states
        window_totals: Integer array of 3x3 window totals, same shape

    Returns:
        Boolean array of next states
    """
    survive = np.isin(window_totals, list(SURVIVAL_TOTALS))
    born = np.isin(window_totals, list(BIRTH_TOTALS))
    return np.where(alive, survive, born)


def window_totals(extended: np.ndarray) -> np.ndarray:
    """Sum every 3x3 window of an array padded by one cell on each side.

    Args:
        extended: Boolean array of shape (h + 2, w + 2)

    Returns:
        Integer array of shape (h, w) with the window total for each inner cell
    """
    height = extended.shape[0] - 2
    width = extended.shape[1] - 2
    counts = extended.astype(np.uint8)
    totals = np.zeros((height, width), dtype=np.uint8)

    for dy in range(3):
        for dx in range(3):
            totals += counts[dy:dy + height, dx:dx + width]

    return totals


def get_rule_table() -> Dict[Tuple[bool, int], bool]:
    """Get the complete rule table.

    Returns:
        Dictionary mapping (current_state, window_total) to next_state
    """
    rules = {}

    for current_state in [False, True]:
        # A live centre contributes at least 1 to its own window
        lowest = 1 if current_state else 0
        highest = 9 if current_state else 8
        for total in range(lowest, highest + 1):
            rules[(current_state, total)] = update_cell(current_state, total)

    return rules
