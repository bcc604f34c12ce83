import logging
from typing import Dict, FrozenSet, Hashable, Iterable, NamedTuple, Optional, Set, Tuple

from .conf import get_setting
from .constants import EPSILON, EPSILON_DISPLAY
from .exceptions import (
    CapacityExceeded,
    DuplicateStartState,
    InvalidState,
    InvalidSymbol,
    NoStartState,
    UnknownState,
)
from .fsa_closure import epsilon_closure, epsilon_closure_set, next_states, next_states_set
from .fsa_properties import is_deterministic
from .fsa_simulation import SimulationResult, accepts, simulate
from .fsa_transformations import nfa_to_dfa
from .state_set import StateSet

logger = logging.getLogger(__name__)


class State(NamedTuple):
    """A state identifier together with its flags"""
    id: Hashable
    is_start: bool = False
    is_accepting: bool = False


class Transition(NamedTuple):
    """An edge from source to target, labelled with a symbol or EPSILON"""
    source: Hashable
    symbol: str
    target: Hashable

    @property
    def is_epsilon(self) -> bool:
        return self.symbol == EPSILON

    def __str__(self) -> str:
        symbol = EPSILON_DISPLAY if self.is_epsilon else self.symbol
        return f"{self.source} --{symbol}--> {self.target}"


def _validate_symbol(symbol) -> str:
    if symbol is None:
        return EPSILON
    if not isinstance(symbol, str) or len(symbol) > 1:
        raise InvalidSymbol(symbol)
    return symbol


class FiniteStateAutomaton:
    """
    A finite state automaton, deterministic or not, with optional epsilon transitions.

    The automaton is built incrementally with add_state() and add_transition()
    and is then queried or converted. Every reference to a state is checked when
    the automaton is mutated, and a failed mutation leaves it unchanged.

    Args:
        max_states: Ceiling on the number of states. Defaults to
            AUTOMATA['MAX_STATES'] from the Django settings (unbounded if unset).
        max_transitions: Ceiling on the number of transitions. Defaults to
            AUTOMATA['MAX_TRANSITIONS'].
    """

    def __init__(self, max_states: Optional[int] = None, max_transitions: Optional[int] = None):
        self.max_states = get_setting('MAX_STATES') if max_states is None else max_states
        self.max_transitions = (
            get_setting('MAX_TRANSITIONS') if max_transitions is None else max_transitions
        )

        self._states: Dict[Hashable, State] = {}
        # Ordered set of transitions
        self._transitions: Dict[Transition, None] = {}
        # state -> symbol -> targets
        self._delta: Dict[Hashable, Dict[str, Set[Hashable]]] = {}
        self._alphabet: Set[str] = set()
        self._start: Optional[Hashable] = None

    # Construction

    def add_state(self, state_id: Hashable, is_start: bool = False, is_accepting: bool = False) -> State:
        """
        Add a state, or replace the flags of an existing one.

        Only one state may be the starting state. Re-adding the current
        starting state with is_start=False leaves the automaton without one.

        Raises:
            InvalidState: If the id is None or unhashable
            DuplicateStartState: If a different state is already the starting state
            CapacityExceeded: If a new state would exceed max_states
        """
        if state_id is None:
            raise InvalidState("State id must not be None")
        try:
            hash(state_id)
        except TypeError:
            raise InvalidState(f"State id must be hashable, got {type(state_id).__name__}") from None

        exists = state_id in self._states
        if not exists and self.max_states is not None and len(self._states) >= self.max_states:
            logger.warning("State ceiling of %d reached while adding %r", self.max_states, state_id)
            raise CapacityExceeded('states', self.max_states)

        if is_start and self._start is not None and self._start != state_id:
            raise DuplicateStartState(state_id, self._start)

        state = State(state_id, bool(is_start), bool(is_accepting))
        self._states[state_id] = state
        if not exists:
            self._delta[state_id] = {}

        if is_start:
            self._start = state_id
        elif self._start == state_id:
            self._start = None

        return state

    def add_transition(self, source: Hashable, target: Hashable, symbol: Optional[str] = EPSILON) -> Transition:
        """
        Add a transition from source to target on symbol.

        The symbol is a single character, or EPSILON ('' or None) for an
        epsilon transition. Adding a transition that already exists is a no-op.

        Raises:
            UnknownState: If either endpoint has not been added
            InvalidSymbol: If the symbol is not a single character or EPSILON
            CapacityExceeded: If a new transition would exceed max_transitions
        """
        symbol = _validate_symbol(symbol)
        self._require_state(source)
        self._require_state(target)

        transition = Transition(source, symbol, target)
        if transition in self._transitions:
            return transition

        if self.max_transitions is not None and len(self._transitions) >= self.max_transitions:
            logger.warning("Transition ceiling of %d reached while adding %s", self.max_transitions, transition)
            raise CapacityExceeded('transitions', self.max_transitions)

        self._transitions[transition] = None
        self._delta[source].setdefault(symbol, set()).add(target)
        if symbol != EPSILON:
            self._alphabet.add(symbol)

        return transition

    def _require_state(self, state_id: Hashable) -> None:
        try:
            known = state_id in self._states
        except TypeError:
            known = False
        if not known:
            raise UnknownState(state_id)

    # Read-only views

    @property
    def states(self) -> Tuple[State, ...]:
        return tuple(self._states.values())

    @property
    def state_ids(self) -> Tuple[Hashable, ...]:
        return tuple(self._states)

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return tuple(self._transitions)

    @property
    def alphabet(self) -> FrozenSet[str]:
        return frozenset(self._alphabet)

    @property
    def start_state(self) -> Optional[Hashable]:
        return self._start

    @property
    def accepting_states(self) -> FrozenSet[Hashable]:
        return frozenset(state.id for state in self._states.values() if state.is_accepting)

    def has_state(self, state_id: Hashable) -> bool:
        try:
            return state_id in self._states
        except TypeError:
            return False

    def get_state(self, state_id: Hashable) -> State:
        self._require_state(state_id)
        return self._states[state_id]

    def is_accepting(self, state_id: Hashable) -> bool:
        return self.get_state(state_id).is_accepting

    def targets(self, source: Hashable, symbol: str) -> FrozenSet[Hashable]:
        """States reachable from source by exactly one transition on symbol."""
        self._require_state(source)
        return frozenset(self._delta[source].get(symbol, ()))

    def symbols_from(self, source: Hashable) -> FrozenSet[str]:
        """Symbols (EPSILON included) labelling at least one transition out of source."""
        self._require_state(source)
        return frozenset(self._delta[source])

    def require_start(self) -> Hashable:
        """Return the starting state, raising NoStartState if there is none."""
        if self._start is None:
            raise NoStartState()
        return self._start

    def __contains__(self, state_id) -> bool:
        return self.has_state(state_id)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(states={len(self._states)}, "
            f"transitions={len(self._transitions)}, start={self._start!r})"
        )

    # Queries

    def closure(self, state: Hashable) -> StateSet:
        return epsilon_closure(self, state)

    def closure_set(self, states: Iterable[Hashable]) -> StateSet:
        return epsilon_closure_set(self, states)

    def next(self, state: Hashable, symbol: str) -> StateSet:
        return next_states(self, state, symbol)

    def next_set(self, states: Iterable[Hashable], symbol: str) -> StateSet:
        return next_states_set(self, states, symbol)

    def accepts(self, input_string: str) -> bool:
        return accepts(self, input_string)

    def simulate(self, input_string: str) -> SimulationResult:
        return simulate(self, input_string)

    def deterministic(self) -> bool:
        return is_deterministic(self)

    def to_dfa(self) -> 'FiniteStateAutomaton':
        return nfa_to_dfa(self)
