from typing import Any, Dict

from django.conf import settings

DEFAULTS: Dict[str, Any] = {
    # Ceiling on states per automaton; None means unbounded
    'MAX_STATES': None,
    # Ceiling on transitions per automaton; None means unbounded
    'MAX_TRANSITIONS': None,
}


def get_setting(name: str) -> Any:
    """
    Look up a key of the ``AUTOMATA`` settings dictionary.

    Falls back to the defaults when the key is missing or when Django
    settings have not been configured, so the engine stays usable as a
    plain library.

    Args:
        name: One of the keys of DEFAULTS

    Returns:
        The configured value, or the default

    Raises:
        KeyError: If the name is not a known setting
    """
    if name not in DEFAULTS:
        raise KeyError(f"Unknown automata setting: {name}")

    if not settings.configured:
        return DEFAULTS[name]

    overrides = getattr(settings, 'AUTOMATA', None) or {}
    return overrides.get(name, DEFAULTS[name])
