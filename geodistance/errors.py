"""Exception classes that are thrown from the geodistance module."""

from typing import Any

__all__ = ("Error", "InvalidArgumentError", "UnsupportedAlgorithmError")


class Error(RuntimeError):
    """Base class for all exceptions that are thrown from the geodistance
    module.
    """

    pass


class InvalidArgumentError(Error, ValueError):
    """Error thrown when a coordinate was given in a form that cannot be
    turned into a latitude-longitude pair.
    """

    pass


class UnsupportedAlgorithmError(Error):
    """Error thrown when the distance calculation is asked to use an
    algorithm that it does not implement.
    """

    def __init__(self, algorithm: Any):
        """Constructor.

        Parameters:
            algorithm: the algorithm selector that was rejected
        """
        super().__init__(f"Algorithm not implemented: {algorithm!r}")
        self.algorithm = algorithm
