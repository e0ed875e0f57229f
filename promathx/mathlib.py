"""Arithmetic, trigonometric and logarithmic primitives.

Every function here is pure and takes plain floats. Domain violations raise
:class:`~promathx.error.DomainError` instead of returning ``nan`` so that the
expression evaluator and direct callers see the same failures.
"""

import math

from .error import DivisionByZero, DomainError


def add(x, y):
    return x + y

def subtract(x, y):
    return x - y

def multiply(x, y):
    return x * y

def divide(x, y):
    if y == 0:
        raise DivisionByZero('Division by zero')
    return x / y

def power(x, y):
    if x == 0 and y < 0:
        raise DivisionByZero('Division by zero')
    if x < 0 and not float(y).is_integer():
        raise DomainError('Invalid input for power: %r ^ %r' % (x, y))
    try:
        return math.pow(x, y)
    except OverflowError as ex:
        raise DomainError('Result out of range: %r ^ %r' % (x, y)) from ex


def sin(angle):
    if not math.isfinite(angle):
        raise DomainError('Invalid input for sin')
    return math.sin(angle)

def cos(angle):
    if not math.isfinite(angle):
        raise DomainError('Invalid input for cos')
    return math.cos(angle)

def tan(angle):
    if not math.isfinite(angle):
        raise DomainError('Invalid input for tan')
    return math.tan(angle)

def asin(value):
    if value < -1 or value > 1:
        raise DomainError('Invalid input for asin')
    return math.asin(value)

def acos(value):
    if value < -1 or value > 1:
        raise DomainError('Invalid input for acos')
    return math.acos(value)

def atan(value):
    return math.atan(value)


def ln(value):
    if value <= 0:
        raise DomainError('Invalid input for natural logarithm')
    return math.log(value)

def log10(value):
    if value <= 0:
        raise DomainError('Invalid input for logarithm')
    return math.log10(value)

def exp(value):
    try:
        return math.exp(value)
    except OverflowError as ex:
        raise DomainError('Result out of range: exp(%r)' % value) from ex


FUNCTIONS = {
    'sin': sin,
    'cos': cos,
    'tan': tan,
    'asin': asin,
    'acos': acos,
    'atan': atan,
    'log': log10,
    'log10': log10,
    'ln': ln,
    'exp': exp
}
