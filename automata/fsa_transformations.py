import logging
from typing import TYPE_CHECKING, Dict, FrozenSet, Hashable, Tuple
from collections import deque

from .fsa_closure import epsilon_closure, epsilon_closure_set, move
from .state_set import StateSet

if TYPE_CHECKING:
    from .fsa_model import FiniteStateAutomaton

logger = logging.getLogger(__name__)


def determinise(nfa: 'FiniteStateAutomaton') -> Tuple['FiniteStateAutomaton', Dict[str, FrozenSet[Hashable]]]:
    """
    Converts an automaton, possibly with epsilon transitions, to an equivalent
    deterministic finite automaton using the subset construction algorithm.

    Each DFA state stands for an epsilon-closed set of NFA states and is named
    after it, e.g. '{1,2,4}'. Sets are interned by value, so every reachable
    set is expanded exactly once. Empty target sets produce no transition
    (the DFA is partial, not complete). The input automaton is not modified.

    Args:
        nfa: The automaton to convert

    Returns:
        Tuple of the DFA and a dictionary mapping each DFA state id to the
        frozenset of NFA states it represents

    Raises:
        CapacityExceeded: If the DFA outgrows the configured ceiling
    """
    dfa = type(nfa)()
    subsets: Dict[str, FrozenSet[Hashable]] = {}

    start = nfa.start_state
    if start is None:
        logger.debug("Automaton has no starting state; returning an empty DFA")
        return dfa, subsets

    logger.debug(
        "Determinising automaton with %d states over alphabet %s",
        len(nfa), sorted(nfa.alphabet),
    )

    # Memorisation cache for epsilon closures
    epsilon_closure_cache: Dict[FrozenSet[Hashable], StateSet] = {}

    def closure_of(states: StateSet) -> StateSet:
        key = states.frozen()
        if key not in epsilon_closure_cache:
            epsilon_closure_cache[key] = epsilon_closure_set(nfa, states)
        return epsilon_closure_cache[key]

    nfa_accepting = nfa.accepting_states
    dfa_state_map: Dict[FrozenSet[Hashable], str] = {}

    def intern(state_set: StateSet, is_start: bool = False) -> str:
        name = str(state_set)
        # State ids containing ',' or braces can render two sets the same way
        suffix = 1
        while name in subsets:
            suffix += 1
            name = f"{state_set}#{suffix}"

        key = state_set.frozen()
        dfa.add_state(name, is_start=is_start, is_accepting=bool(key & nfa_accepting))
        dfa_state_map[key] = name
        subsets[name] = key
        return name

    start_closure = epsilon_closure(nfa, start)
    intern(start_closure, is_start=True)
    queue = deque([start_closure])
    alphabet = sorted(nfa.alphabet)

    while queue:
        current = queue.popleft()
        current_name = dfa_state_map[current.frozen()]

        for symbol in alphabet:
            # current is already epsilon-closed, so this equals next_states_set()
            moved = move(nfa, current, symbol)
            if not moved:
                continue
            target = closure_of(moved)

            target_name = dfa_state_map.get(target.frozen())
            if target_name is None:
                target_name = intern(target)
                queue.append(target)

            dfa.add_transition(current_name, target_name, symbol)

    logger.debug(
        "Built DFA with %d states and %d transitions", len(dfa), len(dfa.transitions)
    )
    return dfa, subsets


def nfa_to_dfa(nfa: 'FiniteStateAutomaton') -> 'FiniteStateAutomaton':
    """
    Converts a non-deterministic finite automaton (NFA) to a deterministic
    finite automaton (DFA) accepting the same language.

    Args:
        nfa: The automaton to convert

    Returns:
        A new, deterministic automaton
    """
    dfa, _ = determinise(nfa)
    return dfa
