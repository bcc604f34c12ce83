from django.test import SimpleTestCase, override_settings
from automata.constants import EPSILON
from automata.exceptions import (
    AutomatonError,
    CapacityExceeded,
    DuplicateStartState,
    InvalidState,
    InvalidSymbol,
    NoStartState,
    UnknownState,
)
from automata.fsa_model import FiniteStateAutomaton, State, Transition


class TestFiniteStateAutomaton(SimpleTestCase):
    """Test cases for building automata"""

    def test_add_state_upserts_flags(self):
        fsa = FiniteStateAutomaton()
        fsa.add_state('S0', is_start=True)
        fsa.add_state('S1')
        fsa.add_state('S1', is_accepting=True)

        self.assertEqual(len(fsa), 2)
        self.assertEqual(fsa.state_ids, ('S0', 'S1'))
        self.assertEqual(fsa.get_state('S1'), State('S1', False, True))
        self.assertEqual(fsa.start_state, 'S0')
        self.assertEqual(fsa.accepting_states, frozenset({'S1'}))

    def test_second_start_state_is_rejected(self):
        fsa = FiniteStateAutomaton()
        fsa.add_state(0, is_start=True)

        with self.assertRaises(DuplicateStartState) as context:
            fsa.add_state(1, is_start=True)

        # Nothing was written
        self.assertEqual(fsa.start_state, 0)
        self.assertNotIn(1, fsa)
        self.assertEqual(context.exception.current, 0)

    def test_readding_start_state(self):
        fsa = FiniteStateAutomaton()
        fsa.add_state(0, is_start=True)
        fsa.add_state(0, is_start=True, is_accepting=True)
        self.assertEqual(fsa.start_state, 0)

        # Clearing the flag leaves the automaton without a starting state
        fsa.add_state(0)
        self.assertIsNone(fsa.start_state)
        fsa.add_state(1, is_start=True)
        self.assertEqual(fsa.start_state, 1)

    def test_invalid_state_ids(self):
        fsa = FiniteStateAutomaton()
        with self.assertRaises(InvalidState):
            fsa.add_state(None)
        with self.assertRaises(InvalidState):
            fsa.add_state(['S0'])
        self.assertEqual(len(fsa), 0)

    def test_transition_requires_known_states(self):
        fsa = FiniteStateAutomaton()
        fsa.add_state('S0', is_start=True)

        with self.assertRaises(UnknownState) as context:
            fsa.add_transition('S0', 'S1', 'a')
        self.assertEqual(context.exception.state, 'S1')

        with self.assertRaises(UnknownState):
            fsa.add_transition('S9', 'S0', 'a')

        self.assertEqual(fsa.transitions, ())
        self.assertEqual(fsa.alphabet, frozenset())

    def test_invalid_symbols(self):
        fsa = FiniteStateAutomaton()
        fsa.add_state(0)
        fsa.add_state(1)

        for symbol in ['ab', 5, b'a']:
            with self.assertRaises(InvalidSymbol):
                fsa.add_transition(0, 1, symbol)
        self.assertEqual(fsa.transitions, ())

    def test_alphabet_tracks_transitions(self):
        fsa = FiniteStateAutomaton()
        fsa.add_state(0, is_start=True)
        fsa.add_state(1, is_accepting=True)
        fsa.add_transition(0, 1, 'a')
        fsa.add_transition(1, 0, 'b')
        fsa.add_transition(0, 1)  # Epsilon is not part of the alphabet
        fsa.add_transition(1, 0, None)

        self.assertEqual(fsa.alphabet, frozenset({'a', 'b'}))
        self.assertEqual(fsa.targets(0, EPSILON), frozenset({1}))
        self.assertEqual(fsa.targets(1, EPSILON), frozenset({0}))
        self.assertEqual(fsa.symbols_from(0), frozenset({'a', EPSILON}))

    def test_duplicate_transition_is_ignored(self):
        fsa = FiniteStateAutomaton()
        fsa.add_state(0)
        fsa.add_state(1)
        fsa.add_transition(0, 1, 'a')
        fsa.add_transition(0, 1, 'a')

        self.assertEqual(fsa.transitions, (Transition(0, 'a', 1),))
        self.assertTrue(fsa.deterministic())

    def test_transition_rendering(self):
        self.assertEqual(str(Transition(0, 'a', 1)), '0 --a--> 1')
        self.assertEqual(str(Transition(0, EPSILON, 1)), '0 --ε--> 1')
        self.assertTrue(Transition(0, EPSILON, 1).is_epsilon)

    def test_require_start(self):
        fsa = FiniteStateAutomaton()
        with self.assertRaises(NoStartState):
            fsa.require_start()
        fsa.add_state('q0', is_start=True)
        self.assertEqual(fsa.require_start(), 'q0')

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(AutomatonError, ValueError))
        for error in (UnknownState, DuplicateStartState, InvalidSymbol, CapacityExceeded, NoStartState):
            self.assertTrue(issubclass(error, AutomatonError))


class TestCapacity(SimpleTestCase):
    """Test cases for the optional state and transition ceilings"""

    def test_unbounded_by_default(self):
        fsa = FiniteStateAutomaton()
        self.assertIsNone(fsa.max_states)
        self.assertIsNone(fsa.max_transitions)
        for state in range(500):
            fsa.add_state(state)
        self.assertEqual(len(fsa), 500)

    def test_state_ceiling(self):
        fsa = FiniteStateAutomaton(max_states=2)
        fsa.add_state(0, is_start=True)
        fsa.add_state(1)
        # Upserting an existing state does not count
        fsa.add_state(1, is_accepting=True)

        with self.assertLogs('automata.fsa_model', level='WARNING'):
            with self.assertRaises(CapacityExceeded) as context:
                fsa.add_state(2)

        self.assertEqual(context.exception.limit, 2)
        self.assertEqual(fsa.state_ids, (0, 1))

    def test_transition_ceiling(self):
        fsa = FiniteStateAutomaton(max_transitions=1)
        fsa.add_state(0)
        fsa.add_state(1)
        fsa.add_transition(0, 1, 'a')

        with self.assertLogs('automata.fsa_model', level='WARNING'):
            with self.assertRaises(CapacityExceeded):
                fsa.add_transition(1, 0, 'b')

        self.assertEqual(len(fsa.transitions), 1)
        self.assertEqual(fsa.alphabet, frozenset({'a'}))

    @override_settings(AUTOMATA={'MAX_STATES': 3, 'MAX_TRANSITIONS': 4})
    def test_ceiling_from_settings(self):
        fsa = FiniteStateAutomaton()
        self.assertEqual(fsa.max_states, 3)
        self.assertEqual(fsa.max_transitions, 4)

        # Constructor arguments take precedence
        self.assertEqual(FiniteStateAutomaton(max_states=10).max_states, 10)

    @override_settings(AUTOMATA={})
    def test_missing_keys_use_defaults(self):
        self.assertIsNone(FiniteStateAutomaton().max_states)
