# Flow status constants

# No run in progress; records cleared, no identifier held
IDLE = "IDLE"

# Steps are being executed in order
RUNNING = "RUNNING"

# Every step of the flow succeeded
COMPLETED = "COMPLETED"

# A step failed; terminal for the run
FAILED = "FAILED"


# Reset (-> IDLE) is always allowed and is not listed here
TRANSITIONS = {
    IDLE: {RUNNING},
    RUNNING: {COMPLETED, FAILED},
    COMPLETED: set(),
    FAILED: set(),
}


class InvalidTransition(RuntimeError):
    pass


def check_transition(current: str, target: str) -> str:
    if target not in TRANSITIONS.get(current, set()):
        raise InvalidTransition(f"{current} -> {target}")
    return target
