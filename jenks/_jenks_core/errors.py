"""Exception types raised by the Jenks core."""

__all__ = ["JenksInvariantError"]


class JenksInvariantError(RuntimeError):
    """
    Raised when the computed class structure is internally inconsistent.

    This signals a defect in matrix construction or boundary extraction
    (a boundary index out of range, or boundaries that are not strictly
    increasing), never bad caller input. It is not meant to be caught
    and recovered from.
    """

    def __init__(self, message: str, *, breaks=None):
        super().__init__(message)
        self.breaks = breaks
