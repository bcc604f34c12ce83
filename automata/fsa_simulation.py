import logging
from typing import TYPE_CHECKING, Optional, Tuple, NamedTuple

from .fsa_closure import epsilon_closure, next_states_set
from .state_set import StateSet

if TYPE_CHECKING:
    from .fsa_model import FiniteStateAutomaton

logger = logging.getLogger(__name__)


class SimulationStep(NamedTuple):
    """The epsilon-closed set of states reached after consuming one symbol"""
    position: int
    symbol: str
    states: StateSet


class SimulationResult(NamedTuple):
    """Outcome of running an automaton over an input string"""
    accepted: bool
    initial: StateSet
    steps: Tuple[SimulationStep, ...]
    rejection_reason: Optional[str]
    rejection_position: Optional[int]

    @property
    def final(self) -> StateSet:
        return self.steps[-1].states if self.steps else self.initial


def _contains_accepting(fsa: 'FiniteStateAutomaton', states: StateSet) -> bool:
    return any(fsa.is_accepting(state) for state in states)


def accepts(fsa: 'FiniteStateAutomaton', input_string: str) -> bool:
    """
    Check whether the automaton accepts the input string.

    Works for deterministic and non-deterministic automata alike, epsilon
    transitions included. An automaton without a starting state accepts
    nothing, not even the empty string.

    Args:
        fsa: The automaton
        input_string: The input string to simulate

    Returns:
        bool: True if some run ends in an accepting state, False otherwise
    """
    start = fsa.start_state
    if start is None:
        logger.debug("Rejecting %r: automaton has no starting state", input_string)
        return False

    current = epsilon_closure(fsa, start)
    for symbol in input_string:
        current = next_states_set(fsa, current, symbol)
        if not current:
            return False

    return _contains_accepting(fsa, current)


def simulate(fsa: 'FiniteStateAutomaton', input_string: str) -> SimulationResult:
    """
    Simulates the automaton over the input string, recording every step.

    Args:
        fsa: The automaton
        input_string: The input string to simulate

    Returns:
        SimulationResult with the closure of the starting state, one step per
        consumed symbol and, if rejected, the reason and the position where
        rejection occurred:
            - no starting state: position 0
            - no transition for a symbol: position of that symbol
            - final states not accepting: len(input_string)
    """
    start = fsa.start_state
    if start is None:
        logger.debug("Rejecting %r: automaton has no starting state", input_string)
        return SimulationResult(False, StateSet(), (), "Automaton has no starting state", 0)

    initial = epsilon_closure(fsa, start)
    current = initial
    steps = []

    for position, symbol in enumerate(input_string):
        current = next_states_set(fsa, current, symbol)
        if not current:
            return SimulationResult(
                False,
                initial,
                tuple(steps),
                f"No transition defined for symbol '{symbol}'",
                position,
            )
        steps.append(SimulationStep(position, symbol, current))

    if _contains_accepting(fsa, current):
        return SimulationResult(True, initial, tuple(steps), None, None)

    return SimulationResult(
        False,
        initial,
        tuple(steps),
        f"Final states {current} contain no accepting state",
        len(input_string),
    )
