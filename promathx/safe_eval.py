"""Expression evaluator.

``evaluate`` runs three stages on every call: the validator rejects
characters outside the accepted set, the tokenizer turns the string into
``(TokenType, value)`` pairs, and a recursive-descent parser builds an
expression tree that is then evaluated.
"""

import re
import enum
import math
import logging

from .error import (
    InvalidCharacter,
    InvalidExpression,
    InvalidFunctionArgument,
    MismatchedParentheses,
    UnknownFunction,
    DomainError
)
from .mathlib import FUNCTIONS, add, subtract, multiply, divide, power


LOGGER = logging.getLogger(__name__)

RE_WHITESPACE = re.compile(r'\s+')
RE_INVALID_CHAR = re.compile(r'[^0-9.+\-*/()^,sincotalgexp]', re.I | re.A)
RE_EXPONENT = re.compile(r'[eE][+-]?[0-9]+')

OPERATORS = '+-*/^'


class TokenType(enum.IntEnum):
    NUMBER = 0
    OPERATOR = 1
    PAREN = 2
    FUNCTION = 3
    SEPARATOR = 4


T = TokenType

END = (None, None)
OPEN = (T.PAREN, '(')
CLOSE = (T.PAREN, ')')
ADD_OPS = ((T.OPERATOR, '+'), (T.OPERATOR, '-'))
MUL_OPS = ((T.OPERATOR, '*'), (T.OPERATOR, '/'))
POW_OP = (T.OPERATOR, '^')


def validate(expression):
    if not isinstance(expression, str):
        raise InvalidExpression('Expression must be a string')
    expression = RE_WHITESPACE.sub('', expression)
    if not expression:
        raise InvalidExpression('Expression is empty')
    match = RE_INVALID_CHAR.search(expression)
    if match is not None:
        raise InvalidCharacter(
            'Invalid character in expression: %r' % match.group()
        )
    return expression


def _number(string):
    try:
        return float(string)
    except ValueError:
        raise InvalidExpression('Invalid number: %s' % string) from None

def _scan(string, i, predicate):
    while i < len(string) and predicate(string[i]):
        i += 1
    return i

def _is_numeric(char):
    return char.isdigit() or char == '.'

def _tokenize(expression):
    i = 0
    while i < len(expression):
        char = expression[i]
        if _is_numeric(char):
            j = _scan(expression, i, _is_numeric)
            match = RE_EXPONENT.match(expression, j)
            if match is not None:
                j = match.end()
            yield (T.NUMBER, _number(expression[i:j]))
        elif char.isalpha():
            j = _scan(expression, i, str.isalpha)
            k = _scan(expression, j, str.isdigit)
            if k > j and expression[i:k].lower() in FUNCTIONS:
                j = k
            yield (T.FUNCTION, expression[i:j])
        elif char in OPERATORS:
            j = i + 1
            yield (T.OPERATOR, char)
        elif char in '()':
            j = i + 1
            yield (T.PAREN, char)
        elif char == ',':
            j = i + 1
            yield (T.SEPARATOR, char)
        else:
            raise InvalidCharacter('Invalid character in expression: %r' % char)
        i = j

def tokenize(expression):
    return list(_tokenize(expression))


class Node:
    def evaluate(self):
        raise NotImplementedError()

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self):
        return '%s(%s)' % (
            type(self).__name__,
            ', '.join(repr(value) for value in vars(self).values())
        )


class Number(Node):
    def __init__(self, value):
        self.value = value

    def evaluate(self):
        return self.value


class UnaryOp(Node):
    def __init__(self, op, operand):
        self.op = op
        self.operand = operand

    def evaluate(self):
        value = self.operand.evaluate()
        return -value if self.op == '-' else value


class BinaryOp(Node):
    OPS = {
        '+': add,
        '-': subtract,
        '*': multiply,
        '/': divide,
        '^': power
    }

    def __init__(self, op, left, right):
        self.op = op
        self.left = left
        self.right = right

    def evaluate(self):
        if self.op == '^':
            return power(self.left.evaluate(), self.right.evaluate())
        # left-associative chains are evaluated along the left spine
        # without recursing into it
        rest = []
        node = self
        while isinstance(node, BinaryOp) and node.op != '^':
            rest.append((node.op, node.right))
            node = node.left
        value = node.evaluate()
        for op, right in reversed(rest):
            value = self.OPS[op](value, right.evaluate())
        return value


class Call(Node):
    def __init__(self, name, argument):
        self.name = name
        self.argument = argument

    def evaluate(self):
        value = self.argument.evaluate()
        try:
            func = FUNCTIONS[self.name.lower()]
        except KeyError:
            raise UnknownFunction('Unknown function: %s' % self.name) from None
        return func(value)


class Parser:
    """Recursive-descent parser over a token list.

    Grammar, lowest precedence first::

        expression := term (('+' | '-') term)*
        term       := unary (('*' | '/') unary)*
        unary      := ('+' | '-') unary | power
        power      := primary ('^' unary)?
        primary    := NUMBER | '(' expression ')' | FUNCTION primary
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return END

    def next(self):
        token = self.peek()
        self.pos += 1
        return token

    def check_parentheses(self):
        depth = 0
        for token in self.tokens:
            if token == OPEN:
                depth += 1
            elif token == CLOSE:
                depth -= 1
                if depth < 0:
                    break
        if depth != 0:
            raise MismatchedParentheses('Mismatched parentheses')

    def parse(self):
        if not self.tokens:
            raise InvalidExpression('Invalid expression')
        self.check_parentheses()
        node = self.expression()
        if self.peek() != END:
            raise InvalidExpression(
                'Invalid expression: unexpected %r' % (self.peek()[1],)
            )
        return node

    def expression(self):
        node = self.term()
        while self.peek() in ADD_OPS:
            _, op = self.next()
            node = BinaryOp(op, node, self.term())
        return node

    def term(self):
        node = self.unary()
        while self.peek() in MUL_OPS:
            _, op = self.next()
            node = BinaryOp(op, node, self.unary())
        return node

    def unary(self):
        if self.peek() in ADD_OPS:
            _, op = self.next()
            return UnaryOp(op, self.unary())
        return self.power()

    def power(self):
        node = self.primary()
        if self.peek() == POW_OP:
            self.next()
            node = BinaryOp('^', node, self.unary())
        return node

    def primary(self):
        type_, value = self.next()
        if type_ == T.NUMBER:
            return Number(value)
        if (type_, value) == OPEN:
            node = self.expression()
            if self.next() != CLOSE:
                raise InvalidExpression('Invalid expression: expected ")"')
            return node
        if type_ == T.FUNCTION:
            arg_type, arg = self.peek()
            if arg_type not in (T.NUMBER, T.FUNCTION) and (arg_type, arg) != OPEN:
                raise InvalidFunctionArgument(
                    'Invalid argument for function %s' % value
                )
            return Call(value, self.primary())
        if type_ is None:
            raise InvalidExpression('Invalid expression: unexpected end')
        raise InvalidExpression('Invalid expression: unexpected %r' % value)


def parse(tokens):
    return Parser(tokens).parse()

def evaluate(expression):
    LOGGER.debug('evaluate %r', expression)
    expression = validate(expression)
    try:
        result = parse(tokenize(expression)).evaluate()
    except RecursionError as ex:
        raise InvalidExpression('Expression is nested too deeply') from ex
    if not math.isfinite(result):
        raise DomainError('Result is not a finite number')
    LOGGER.debug('evaluate %r = %r', expression, result)
    return result
