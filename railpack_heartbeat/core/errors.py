"""Exception hierarchy for the heartbeat emitter."""


class HeartbeatError(Exception):
    """Package base exception."""


class EmitterStateError(HeartbeatError):
    """Operation not allowed in the emitter's current state."""


class SchedulerError(HeartbeatError):
    """Timer registration rejected."""
