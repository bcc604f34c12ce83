class AutomatonError(ValueError):
    """Base class for structural errors raised while building or querying an automaton."""


class InvalidState(AutomatonError):
    """A state identifier is None or cannot be hashed."""


class UnknownState(AutomatonError):
    """A transition or query references a state that was never added."""

    def __init__(self, state):
        self.state = state
        super().__init__(f"Unknown state: {state!r}")


class DuplicateStartState(AutomatonError):
    """A second, different state was marked as the starting state."""

    def __init__(self, state, current):
        self.state = state
        self.current = current
        super().__init__(
            f"Cannot mark {state!r} as starting state: {current!r} is already the starting state"
        )


class InvalidSymbol(AutomatonError):
    """A transition symbol is neither epsilon nor a single character."""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Invalid transition symbol: {symbol!r}")


class CapacityExceeded(AutomatonError):
    """Adding a state or transition would exceed the configured ceiling."""

    def __init__(self, kind: str, limit: int):
        self.kind = kind
        self.limit = limit
        super().__init__(f"Automaton cannot hold more than {limit} {kind}")


class NoStartState(AutomatonError):
    """An operation that needs a starting state was run on an automaton without one."""

    def __init__(self):
        super().__init__("Automaton has no starting state")
