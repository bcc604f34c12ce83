from typing import FrozenSet, Hashable, Iterable, Iterator, List, Tuple


def state_sort_key(state: Hashable) -> Tuple[int, object]:
    """Sort key placing integer ids (numerically) before every other id (as text)."""
    if isinstance(state, int) and not isinstance(state, bool):
        return 0, state
    return 1, str(state)


class StateSet:
    """Set of state identifiers used for closures and subset construction"""

    __slots__ = ('_states',)
    __hash__ = None  # mutable; use frozen() as a dictionary key

    def __init__(self, states: Iterable[Hashable] = ()):
        self._states = set(states)

    def __contains__(self, state) -> bool:
        return state in self._states

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __bool__(self) -> bool:
        return bool(self._states)

    def __eq__(self, other) -> bool:
        if isinstance(other, StateSet):
            return self._states == other._states
        if isinstance(other, (set, frozenset)):
            return self._states == other
        return NotImplemented

    def __or__(self, other: Iterable[Hashable]) -> 'StateSet':
        return self.union(other)

    def contains(self, state) -> bool:
        return state in self._states

    def add(self, state: Hashable) -> None:
        self._states.add(state)

    def update(self, states: Iterable[Hashable]) -> None:
        self._states.update(states)

    def union(self, other: Iterable[Hashable]) -> 'StateSet':
        result = StateSet(self._states)
        result.update(other)
        return result

    def equals(self, other) -> bool:
        return self == other

    def copy(self) -> 'StateSet':
        return StateSet(self._states)

    def frozen(self) -> FrozenSet[Hashable]:
        """Canonical, hashable form of the members."""
        return frozenset(self._states)

    def sorted(self) -> List[Hashable]:
        return sorted(self._states, key=state_sort_key)

    def __str__(self) -> str:
        return '{' + ','.join(str(state) for state in self.sorted()) + '}'

    def __repr__(self) -> str:
        return f"StateSet({self.sorted()!r})"
