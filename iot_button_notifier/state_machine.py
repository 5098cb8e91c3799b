"""Invocation state machine for a single button press."""

START = "START"
TOPIC_RESOLVED = "TOPIC_RESOLVED"
SUBSCRIPTION_ENSURED = "SUBSCRIPTION_ENSURED"
PUBLISHED = "PUBLISHED"
ERROR = "ERROR"

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    START: {TOPIC_RESOLVED, ERROR},
    TOPIC_RESOLVED: {SUBSCRIPTION_ENSURED, ERROR},
    SUBSCRIPTION_ENSURED: {PUBLISHED, ERROR},
    PUBLISHED: set(),
    ERROR: set(),
}

TERMINAL_STATES = frozenset(
    state for state, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def validate_transition(current: str, new: str) -> None:
    """Raise when a transition is not allowed by the state machine."""

    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise ValueError(f"Invalid transition: {current} -> {new}")


def is_terminal(state: str) -> bool:
    return state in TERMINAL_STATES
