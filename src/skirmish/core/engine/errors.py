"""Exceptions for caller contract violations.

These are programmer errors. Invalid game actions are never raised: they come
back as rejected ``ResolveResult`` values instead.
"""


class EngineError(Exception):
    """Base class for engine contract violations."""


class MissingStateError(EngineError):
    """Raised when resolve() is called without a battle state."""

    def __init__(self):
        super().__init__("resolve() requires a battle state, got None")


class MissingCommandError(EngineError):
    """Raised when resolve() is called without a command."""

    def __init__(self):
        super().__init__("resolve() requires a command, got None")


class UnknownCommandError(EngineError):
    """Raised when a command is not one of the known command kinds."""

    def __init__(self, command: object):
        self.command = command
        super().__init__(f"Unknown command kind: {type(command).__name__}")


class MissingRandomSourceError(EngineError):
    """Raised when the engine is constructed without a random source."""

    def __init__(self):
        super().__init__("BattleEngine requires a random source")


class RandomSourceError(EngineError):
    """Raised when a random source cannot honour a request."""


class RandomSourceExhausted(RandomSourceError):
    """Raised when a scripted random source runs out of values."""

    def __init__(self, consumed: int):
        self.consumed = consumed
        super().__init__(f"Scripted random source exhausted after {consumed} values")
