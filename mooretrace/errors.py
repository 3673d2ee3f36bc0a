# errors.py
# exception hierarchy shared by loaders and the tracer


class MooreTraceError(Exception):
    """Base class for everything this package raises on purpose."""


class ShapeError(MooreTraceError, ValueError):
    """Input is not a rectangular 2-D grid."""


class AlgorithmInvariantError(MooreTraceError, RuntimeError):
    """The walk reached a state its invariants rule out (a bug, not bad input)."""


class StepBudgetExceeded(MooreTraceError, RuntimeError):
    """The walk needed more neighbour probes than the caller allowed."""


class ConfigError(MooreTraceError, ValueError):
    """A setting (usually from the environment) has an unusable value."""
