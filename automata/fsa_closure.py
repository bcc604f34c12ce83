from typing import TYPE_CHECKING, Hashable, Iterable

from .constants import EPSILON
from .exceptions import InvalidSymbol
from .state_set import StateSet

if TYPE_CHECKING:
    from .fsa_model import FiniteStateAutomaton


def epsilon_closure(fsa: 'FiniteStateAutomaton', state: Hashable) -> StateSet:
    """
    Compute the epsilon closure of a single state.

    Args:
        fsa: The automaton
        state: Id of the state to close

    Returns:
        StateSet containing the state and every state reachable from it
        through epsilon transitions only
    """
    return epsilon_closure_set(fsa, (state,))


def epsilon_closure_set(fsa: 'FiniteStateAutomaton', states: Iterable[Hashable]) -> StateSet:
    """
    Compute the epsilon closure of a set of states.

    A single worklist traversal seeded with every state at once. States are
    marked when first reached, so epsilon cycles terminate.

    Args:
        fsa: The automaton
        states: Ids of the states to close

    Returns:
        StateSet of states reachable via epsilon transitions, seeds included

    Raises:
        UnknownState: If a seed is not a state of the automaton
    """
    closure = StateSet()
    stack = []
    for state in states:
        fsa.get_state(state)
        if state not in closure:
            closure.add(state)
            stack.append(state)

    while stack:
        current = stack.pop()
        for epsilon_target in fsa.targets(current, EPSILON):
            if epsilon_target not in closure:
                closure.add(epsilon_target)
                stack.append(epsilon_target)

    return closure


def move(fsa: 'FiniteStateAutomaton', states: Iterable[Hashable], symbol: str) -> StateSet:
    """States reachable from the given states by one transition on symbol, without closing."""
    result = StateSet()
    for state in states:
        result.update(fsa.targets(state, symbol))
    return result


def _check_symbol(symbol) -> None:
    if symbol == EPSILON or not isinstance(symbol, str) or len(symbol) != 1:
        raise InvalidSymbol(symbol)


def next_states(fsa: 'FiniteStateAutomaton', state: Hashable, symbol: str) -> StateSet:
    """
    Get all states reachable from a state on an input symbol.

    The state is epsilon-closed, the symbol is consumed from every state of
    the closure, and the targets are epsilon-closed again. The result must
    not be closed a second time by callers.

    Args:
        fsa: The automaton
        state: Source state id
        symbol: Input symbol (a single character, never EPSILON)

    Returns:
        Epsilon-closed StateSet, empty if no transition matches

    Raises:
        InvalidSymbol: If the symbol is EPSILON or not a single character
        UnknownState: If the state is not a state of the automaton
    """
    return next_states_set(fsa, (state,), symbol)


def next_states_set(fsa: 'FiniteStateAutomaton', states: Iterable[Hashable], symbol: str) -> StateSet:
    """
    Union of next_states() over every state of a set.

    Computed as one closure of the sources, one move, and one closure of
    the targets.
    """
    _check_symbol(symbol)
    sources = epsilon_closure_set(fsa, states)
    return epsilon_closure_set(fsa, move(fsa, sources, symbol))
