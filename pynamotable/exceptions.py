"""
PynamoTable exceptions
"""
from typing import Optional


class PynamoTableException(Exception):
    """
    Base class for all PynamoTable exceptions.
    """

    msg: str

    def __init__(self, msg: Optional[str] = None) -> None:
        self.msg = msg if msg is not None else self.msg
        super(PynamoTableException, self).__init__(self.msg)


class InvalidOptionError(PynamoTableException, ValueError):
    """
    Raised when a table or index option is malformed or used where it does not apply
    """
    msg = "Invalid table option"
