"""Boolean query language: ``&`` (and), ``|`` (or), ``!`` (not) and brackets."""

from __future__ import annotations

from dataclasses import dataclass

AND = "&"
OR = "|"
NOT = "!"
LEFT_BRACKET = "("
RIGHT_BRACKET = ")"

_OPERATOR_CHARS = frozenset((AND, OR, NOT, LEFT_BRACKET, RIGHT_BRACKET))
_PRECEDENCE = {NOT: 3, AND: 2, OR: 1}
_APOSTROPHE = "'"


class QuerySyntaxError(ValueError):
    """The query text could not be tokenized or parsed."""


class LogicNode:
    """A node of a parsed query."""

    __slots__ = ()


@dataclass(frozen=True)
class FalseNode(LogicNode):
    """Matches nothing; the result of an empty query."""


@dataclass(frozen=True)
class TermNode(LogicNode):
    term: str


@dataclass(frozen=True)
class AndNode(LogicNode):
    lhs: LogicNode
    rhs: LogicNode


@dataclass(frozen=True)
class OrNode(LogicNode):
    lhs: LogicNode
    rhs: LogicNode


@dataclass(frozen=True)
class NotNode(LogicNode):
    operand: LogicNode


def tokenize_query(text: str) -> list[str]:
    """Split a query into lower-cased terms and single-character operators.

    Terms are runs of letters, continued by apostrophes once started.
    Whitespace separates tokens; any other character is an error.
    """
    tokens: list[str] = []
    word: list[str] = []

    for ch in text:
        if ch.isalpha() or (ch == _APOSTROPHE and word):
            word.append(ch.lower())
            continue

        if word:
            tokens.append("".join(word))
            word.clear()

        if ch.isspace():
            continue
        if ch not in _OPERATOR_CHARS:
            raise QuerySyntaxError(f"Encountered invalid character: '{ch}'")
        tokens.append(ch)

    if word:
        tokens.append("".join(word))

    return tokens


def _pop_operand(operands: list[LogicNode]) -> LogicNode:
    if not operands:
        raise QuerySyntaxError("Missing argument")
    return operands.pop()


def _reduce(operators: list[str], operands: list[LogicNode]) -> None:
    if not operators:
        raise QuerySyntaxError("Expected operator")
    op = operators.pop()
    if op == NOT:
        operands.append(NotNode(_pop_operand(operands)))
    elif op in (AND, OR):
        rhs = _pop_operand(operands)
        lhs = _pop_operand(operands)
        operands.append(AndNode(lhs, rhs) if op == AND else OrNode(lhs, rhs))
    else:
        raise QuerySyntaxError(f"Unexpected operator '{op}'")


def parse_logic_expr(text: str) -> LogicNode:
    """Parse a query into a tree of logic nodes.

    ``!`` binds tighter than ``&``, which binds tighter than ``|``.
    An empty query yields :class:`FalseNode`.
    """
    operands: list[LogicNode] = []
    operators: list[str] = []

    for token in tokenize_query(text):
        if token in _PRECEDENCE:
            precedence = _PRECEDENCE[token]
            while operators and _PRECEDENCE.get(operators[-1], 0) >= precedence:
                _reduce(operators, operands)
            operators.append(token)
        elif token == LEFT_BRACKET:
            operators.append(token)
        elif token == RIGHT_BRACKET:
            while operators:
                if operators[-1] == LEFT_BRACKET:
                    operators.pop()
                    break
                _reduce(operators, operands)
        else:
            operands.append(TermNode(token))

    while operators:
        _reduce(operators, operands)

    return operands.pop() if operands else FalseNode()