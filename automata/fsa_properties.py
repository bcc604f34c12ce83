from typing import TYPE_CHECKING, Dict

from .constants import EPSILON

if TYPE_CHECKING:
    from .fsa_model import FiniteStateAutomaton


def has_epsilon_transitions(fsa: 'FiniteStateAutomaton') -> bool:
    """
    Check if the FSA has any epsilon transitions.

    Args:
        fsa: The automaton

    Returns:
        True if there are epsilon transitions, False otherwise
    """
    return any(transition.symbol == EPSILON for transition in fsa.transitions)


def is_deterministic(fsa: 'FiniteStateAutomaton') -> bool:
    """
    Checks if the FSA is deterministic.

    An FSA is deterministic if:
    1. It has no epsilon transitions
    2. For each state and each symbol, there is at most one transition

    Unreachable states count: non-determinism anywhere in the automaton
    disqualifies it.

    Args:
        fsa: The automaton

    Returns:
        bool: True if the FSA is deterministic, False otherwise
    """
    if has_epsilon_transitions(fsa):
        return False

    seen = set()
    for transition in fsa.transitions:
        key = (transition.source, transition.symbol)
        if key in seen:
            return False
        seen.add(key)

    return True


def check_all_properties(fsa: 'FiniteStateAutomaton') -> Dict:
    """
    Check all FSA properties at once.

    Returns:
        Dict: Dictionary containing all property check results:
        {
            'deterministic': bool,
            'epsilon_free': bool,
            'has_start_state': bool
        }
    """
    return {
        'deterministic': is_deterministic(fsa),
        'epsilon_free': not has_epsilon_transitions(fsa),
        'has_start_state': fsa.start_state is not None,
    }
