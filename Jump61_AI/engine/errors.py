"""Exceptions raised by the board, referee, and read-only board views."""


class Jump61Error(Exception):
    pass


class OutOfBoundsError(Jump61Error, IndexError):
    """Row/column or square number outside the grid."""


class IllegalMoveError(Jump61Error, ValueError):
    """Move string that cannot be parsed or fails Board.is_legal."""


class ReadOnlyBoardError(Jump61Error, TypeError):
    """Mutation attempted through a ConstantBoard."""


class InvariantViolation(Jump61Error, AssertionError):
    """Board found overfull or with a side/spot mismatch at rest."""
