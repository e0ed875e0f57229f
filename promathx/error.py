from enum import IntEnum


class ErrorKind(IntEnum):
    INVALID_CHARACTER = 1
    MISMATCHED_PARENTHESES = 2
    INVALID_FUNCTION_ARGUMENT = 3
    UNKNOWN_FUNCTION = 4
    DIVISION_BY_ZERO = 5
    INVALID_EXPRESSION = 6
    DOMAIN_ERROR = 7
    INVALID_FORMAT = 8


class CalcError(Exception):
    kind = None


class InvalidCharacter(CalcError):
    kind = ErrorKind.INVALID_CHARACTER


class MismatchedParentheses(CalcError):
    kind = ErrorKind.MISMATCHED_PARENTHESES


class InvalidFunctionArgument(CalcError):
    kind = ErrorKind.INVALID_FUNCTION_ARGUMENT


class UnknownFunction(CalcError):
    kind = ErrorKind.UNKNOWN_FUNCTION


class DivisionByZero(CalcError):
    kind = ErrorKind.DIVISION_BY_ZERO


class InvalidExpression(CalcError):
    kind = ErrorKind.INVALID_EXPRESSION


class DomainError(CalcError):
    kind = ErrorKind.DOMAIN_ERROR


class InvalidFormat(CalcError):
    kind = ErrorKind.INVALID_FORMAT


class BotError(Exception):
    pass


class CommandError(BotError):
    pass
