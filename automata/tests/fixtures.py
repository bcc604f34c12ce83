from automata.fsa_model import FiniteStateAutomaton


def abb_nfa() -> FiniteStateAutomaton:
    """Thompson-style NFA for (a|b)*abb: states 0..10, start 0, accepting 10."""
    nfa = FiniteStateAutomaton()
    for state in range(11):
        nfa.add_state(state, is_start=state == 0, is_accepting=state == 10)

    for source, target in [(0, 1), (0, 7), (1, 2), (1, 4), (3, 6), (5, 6), (6, 1), (6, 7)]:
        nfa.add_transition(source, target)

    nfa.add_transition(2, 3, 'a')
    nfa.add_transition(4, 5, 'b')
    nfa.add_transition(7, 8, 'a')
    nfa.add_transition(8, 9, 'b')
    nfa.add_transition(9, 10, 'b')
    return nfa


def ends_with_ab_nfa() -> FiniteStateAutomaton:
    """NFA without epsilon transitions accepting strings ending with 'ab'."""
    nfa = FiniteStateAutomaton()
    nfa.add_state('S0', is_start=True)
    nfa.add_state('S1')
    nfa.add_state('S2', is_accepting=True)
    nfa.add_transition('S0', 'S0', 'a')
    nfa.add_transition('S0', 'S1', 'a')  # Non-deterministic on 'a'
    nfa.add_transition('S0', 'S0', 'b')
    nfa.add_transition('S1', 'S2', 'b')
    return nfa
