class DelveError(Exception):
    """Base exception for the delve package."""


class ConfigError(DelveError, ValueError):
    """Raised when a config file can't be turned into a GameConfig."""


class ContractViolation(DelveError):
    """A caller broke an invariant of the simulation core.

    These are programming errors; the core raises them and never catches them.
    """


class OutOfBounds(ContractViolation, IndexError):
    """Grid access outside ``[0, width) x [0, height)``."""


class InvalidEntity(ContractViolation, IndexError):
    """Entity id that is not in the registry."""


class MissingCapability(ContractViolation):
    """Operation needs a capability (Fighter, Ai) the entity doesn't carry."""


class AliasedAccess(ContractViolation, ValueError):
    """Two-entity access was asked for the same entity twice."""


class EngineExited(ContractViolation):
    """The turn engine was driven after it reached its terminal state."""
