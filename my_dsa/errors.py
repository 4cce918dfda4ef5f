"""Exceptions raised on precondition violations.

Absence (empty pop, missing key, unknown vertex) is never an exception;
those operations return None, False or an empty result instead.
"""


class DsaError(Exception):
    """Base class for every error raised by my_dsa."""


class InvalidArgumentError(DsaError, ValueError):
    pass


class ElementOutOfRangeError(DsaError, IndexError):
    def __init__(self, element, size):
        super().__init__(f"element {element} is outside 0..{size - 1}")
        self.element = element
        self.size = size
