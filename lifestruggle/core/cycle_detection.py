"""Floyd-style cycle detection over deterministic state sequences.

A sequence produced by repeatedly applying a deterministic step function is
eventually periodic: a tail of `mu` states followed by a loop of `lambda`
states. These helpers find out whether (and where) such a sequence repeats.
"""

from typing import Callable, Optional, Sequence, Tuple, TypeVar
import logging

logger = logging.getLogger(__name__)

State = TypeVar('State')


def revisits_earlier_state(sequence: Sequence[State]) -> bool:
    """Incremental tortoise/hare check on a growing sequence.

    Compares the element at index ``len // 2`` with the last element. Called
    after each append, this visits every tortoise/hare pair (i, 2i), so a
    sequence that has entered a loop is caught within one loop length of the
    tortoise joining it. The check only starts at length 3, where the two
    indices first differ.

    Args:
        sequence: States generated so far, oldest first

    Returns:
        True if the two compared states are equal, i.e. the sequence repeats
    """
    length = len(sequence)
    if length < 3:
        return False
    return sequence[length // 2] == sequence[length - 1]


def find_cycle(start: State,
               step: Callable[[State], State],
               max_steps: Optional[int] = None) -> Tuple[int, int]:
    """Classic Floyd tortoise and hare.

    Args:
        start: First state of the sequence
        step: Deterministic successor function
        max_steps: Optional bound on hare moves before giving up

    Returns:
        (tail_length, period): index of the first state on the loop and the
        loop length. A purely periodic sequence has tail_length 0.

    Raises:
        RuntimeError: If no repeat is found within max_steps
    """
    steps = 0

    def advance(state: State) -> State:
        nonlocal steps
        steps += 1
        if max_steps is not None and steps > max_steps:
            raise RuntimeError(f"No cycle found within {max_steps} steps")
        return step(state)

    # Phase 1: hare moves twice as fast until they meet inside the loop
    tortoise = step(start)
    hare = advance(step(start))
    while tortoise != hare:
        tortoise = step(tortoise)
        hare = advance(step(hare))

    # Phase 2: restart tortoise; they meet at the loop entrance
    tail_length = 0
    tortoise = start
    while tortoise != hare:
        tortoise = step(tortoise)
        hare = step(hare)
        tail_length += 1

    # Phase 3: walk once around the loop
    period = 1
    hare = step(tortoise)
    while tortoise != hare:
        hare = step(hare)
        period += 1

    logger.debug(f"Cycle found: tail={tail_length}, period={period}")
    return tail_length, period
