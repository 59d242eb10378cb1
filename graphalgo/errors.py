"""Exceptions raised by graph construction, queries and property checks."""


class GraphError(Exception):
    """Base exception for errors raised by graphalgo."""
    pass


class OutOfRangeError(GraphError, IndexError):
    """A vertex or cell index lies outside the declared graph or grid."""
    pass


class InvalidStartError(GraphError, ValueError):
    """The start cell of a grid search is an obstacle."""
    pass


class InvalidTargetError(GraphError, ValueError):
    """The target cell of a grid search is an obstacle."""
    pass


class NegativeCycleError(GraphError, ValueError):
    """The graph contains a cycle whose total weight is negative."""
    pass


class CheckError(GraphError, AssertionError):
    """A property check failed on a sampled input."""
    pass
