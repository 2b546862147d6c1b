"""Exceptions raised by clustering procedures."""


class ConvergenceError(RuntimeError):
    """A clustering procedure reached a state it cannot recover from."""


class EmptyClusterError(ConvergenceError):
    """A cluster lost all of its points and no replacement center was allowed or found."""

    def __init__(self, message: str = "empty cluster encountered in k-means"):
        super().__init__(message)
