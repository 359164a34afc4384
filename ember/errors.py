class EmberError(Exception):
    """ Base class for all Ember errors"""
    status = 1


class EmberTypeError(EmberError):
    """ Raised when an object outside the value model reaches the writer"""


class EmberConfigError(EmberError):
    """ Raised when a configuration value is not recognised"""


class ReaderError(EmberError):
    """ Base class for errors detected while reading input"""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


class LexicalError(ReaderError):
    """ Raised for a malformed number, character literal or '#' dispatch"""
    status = 2


class StructuralError(ReaderError):
    """ Raised for bad dotted-pair syntax, a missing ')' or unexpected input"""
    status = 3


class TruncationError(ReaderError):
    """ Raised when input ends inside a string literal"""
    status = 4
