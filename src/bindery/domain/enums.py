from enum import Enum


class Lifetime(str, Enum):
    """Defines how long a resolved instance is reused.

    Attributes:
        TRANSIENT: New instance created on each resolution.
        SCOPED: Single instance per request boundary.
        SINGLETON: Single instance per container, created on first resolution.
    """

    TRANSIENT = "transient"
    SCOPED = "scoped"
    SINGLETON = "singleton"

    def __str__(self) -> str:
        return self.value
