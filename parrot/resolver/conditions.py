"""Condition compiler for conditional entries.

A condition is a small boolean expression over the parameter bag,
written with the same ``{field}`` references used in templates:

    "{count} === 0"
    "{gender} == 'female' && {name} == 'john'"
    "!({count} > 10) or {vip}"

Supported:
- field references: {name}
- literals: numbers, 'single' or "double" quoted strings,
  true, false, null, undefined
- comparisons: === !== == != < <= > >=
- boolean operators: && || ! (and the words and, or, not); ``!`` binds
  tighter than comparisons, ``not`` looser
- parentheses

Each condition is parsed once, when the registry is built, into a tree of
frozen dataclasses. Evaluation walks that tree; no code is generated.

Comparison semantics:
- ``===`` / ``!==`` never convert: 1 and "1" differ, 1 and 1.0 do not.
- ``==`` / ``!=`` compare a number with a numeric string by value.
- ``<``, ``<=``, ``>``, ``>=`` compare two strings alphabetically and
  anything else numerically; a missing field or non-numeric text makes
  the comparison false.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any

from parrot.core.errors import PredicateSyntaxError
from parrot.core.types import Params

logger = logging.getLogger(__name__)

_TOKEN_SPEC = [
    ("FIELD", r"\{[^{}]*\}"),
    ("NUMBER", r"-?\d+(?:\.\d+)?"),
    ("STRING", r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\""),
    ("OP", r"===|!==|==|!=|<=|>=|&&|\|\||<|>|!"),
    ("LPAREN", r"\("),
    ("RPAREN", r"\)"),
    ("NAME", r"[A-Za-z_]\w*"),
    ("WS", r"\s+"),
    ("MISMATCH", r"."),
]
_TOKEN_RE = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC))

COMPARISON_OPERATORS = {"===", "!==", "==", "!=", "<", "<=", ">", ">="}

_KEYWORD_LITERALS = {"true": True, "false": False, "null": None, "undefined": None}
_WORD_OPERATORS = {"and": "&&", "or": "||", "not": "not"}


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    position: int


# =============================================================================
# EXPRESSION TREE
# =============================================================================


def is_truthy(value: Any) -> bool:
    """Truthiness used by conditions: None, "", 0, NaN and False are false."""
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_number(value: Any) -> float:
    """Numeric view of a value; NaN when it has none."""
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if _is_number(value):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return math.nan


def _strict_equal(left: Any, right: Any) -> bool:
    if _is_number(left) and _is_number(right):
        return left == right
    if type(left) is not type(right):
        return False
    return left == right


def _loose_equal(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return left is None and right is None
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if _is_number(left) or _is_number(right) or isinstance(left, bool) or isinstance(right, bool):
        return _to_number(left) == _to_number(right)
    return left == right


def _relational(op: str, left: Any, right: Any) -> bool:
    if isinstance(left, str) and isinstance(right, str):
        a, b = left, right
    else:
        a, b = _to_number(left), _to_number(right)
        if math.isnan(a) or math.isnan(b):
            return False
    if op == "<":
        return a < b
    if op == "<=":
        return a <= b
    if op == ">":
        return a > b
    return a >= b


@dataclass(frozen=True)
class Literal:
    value: Any

    def evaluate(self, params: Params) -> Any:
        return self.value


@dataclass(frozen=True)
class FieldRef:
    name: str

    def evaluate(self, params: Params) -> Any:
        return params.get(self.name)


@dataclass(frozen=True)
class Not:
    operand: "Expression"

    def evaluate(self, params: Params) -> bool:
        return not is_truthy(self.operand.evaluate(params))


@dataclass(frozen=True)
class BoolOp:
    """``&&`` / ``||`` chain; short-circuits and yields the deciding operand."""

    op: str
    operands: tuple["Expression", ...]

    def evaluate(self, params: Params) -> Any:
        value: Any = None
        for operand in self.operands:
            value = operand.evaluate(params)
            if self.op == "&&" and not is_truthy(value):
                return value
            if self.op == "||" and is_truthy(value):
                return value
        return value


@dataclass(frozen=True)
class Compare:
    op: str
    left: "Expression"
    right: "Expression"

    def evaluate(self, params: Params) -> bool:
        a = self.left.evaluate(params)
        b = self.right.evaluate(params)
        if self.op == "===":
            return _strict_equal(a, b)
        if self.op == "!==":
            return not _strict_equal(a, b)
        if self.op == "==":
            return _loose_equal(a, b)
        if self.op == "!=":
            return not _loose_equal(a, b)
        return _relational(self.op, a, b)


Expression = Literal | FieldRef | Not | BoolOp | Compare


# =============================================================================
# PARSER
# =============================================================================


def tokenize(source: str) -> list[Token]:
    """Split a condition into tokens, dropping whitespace.

    Raises:
        PredicateSyntaxError: on a character that starts no token
    """
    tokens = []
    for match in _TOKEN_RE.finditer(source):
        kind = match.lastgroup
        text = match.group()
        if kind == "WS":
            continue
        if kind == "MISMATCH":
            raise PredicateSyntaxError(source, f"unexpected character {text!r}", match.start())
        if kind == "NAME" and text in _WORD_OPERATORS:
            kind, text = "OP", _WORD_OPERATORS[text]
        tokens.append(Token(kind, text, match.start()))
    return tokens


class _Parser:
    """Recursive descent over: or -> and -> not -> comparison -> unary -> operand.

    The word ``not`` negates a whole comparison; ``!`` binds to the operand
    right after it, so ``!{a} === true`` reads as ``(!{a}) === true``.
    """

    def __init__(self, source: str):
        self.source = source
        self.tokens = tokenize(source)
        self.pos = 0

    def _peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _error(self, reason: str, token: Token | None = None) -> PredicateSyntaxError:
        position = token.position if token else len(self.source)
        return PredicateSyntaxError(self.source, reason, position)

    def _accept_op(self, *ops: str) -> Token | None:
        token = self._peek()
        if token and token.kind == "OP" and token.text in ops:
            return self._advance()
        return None

    def parse(self) -> Expression:
        if not self.tokens:
            raise self._error("empty condition")
        expr = self._parse_or()
        leftover = self._peek()
        if leftover is not None:
            raise self._error(f"unexpected {leftover.text!r}", leftover)
        return expr

    def _parse_or(self) -> Expression:
        operands = [self._parse_and()]
        while self._accept_op("||"):
            operands.append(self._parse_and())
        return operands[0] if len(operands) == 1 else BoolOp("||", tuple(operands))

    def _parse_and(self) -> Expression:
        operands = [self._parse_not()]
        while self._accept_op("&&"):
            operands.append(self._parse_not())
        return operands[0] if len(operands) == 1 else BoolOp("&&", tuple(operands))

    def _parse_not(self) -> Expression:
        if self._accept_op("not"):
            return Not(self._parse_not())
        return self._parse_comparison()

    def _parse_comparison(self) -> Expression:
        left = self._parse_unary()
        op = self._accept_op(*COMPARISON_OPERATORS)
        if op is None:
            return left
        right = self._parse_unary()
        follow = self._peek()
        if follow and follow.kind == "OP" and follow.text in COMPARISON_OPERATORS:
            raise self._error("chained comparisons need parentheses", follow)
        return Compare(op.text, left, right)

    def _parse_unary(self) -> Expression:
        if self._accept_op("!"):
            return Not(self._parse_unary())
        return self._parse_operand()

    def _parse_operand(self) -> Expression:
        token = self._peek()
        if token is None:
            raise self._error("expression ends too early")
        self._advance()

        if token.kind == "LPAREN":
            expr = self._parse_or()
            closing = self._peek()
            if closing is None or closing.kind != "RPAREN":
                raise self._error("missing ')'", closing)
            self._advance()
            return expr
        if token.kind == "FIELD":
            name = token.text[1:-1].strip()
            if not name:
                raise self._error("empty field reference", token)
            return FieldRef(name)
        if token.kind == "NUMBER":
            if "." in token.text:
                return Literal(float(token.text))
            return Literal(int(token.text))
        if token.kind == "STRING":
            return Literal(_unquote(token.text))
        if token.kind == "NAME":
            if token.text in _KEYWORD_LITERALS:
                return Literal(_KEYWORD_LITERALS[token.text])
            raise self._error(
                f"unknown name {token.text!r} (reference parameters as {{{token.text}}})",
                token,
            )
        raise self._error(f"unexpected {token.text!r}", token)


def _unquote(text: str) -> str:
    body = text[1:-1]
    return re.sub(r"\\(.)", r"\1", body)


def parse_condition(source: str) -> Expression:
    """Parse a condition source into an expression tree.

    Raises:
        PredicateSyntaxError: if the source is not a valid condition
    """
    return _Parser(source or "").parse()


# =============================================================================
# COMPILED CONDITIONS
# =============================================================================


@dataclass(frozen=True)
class CompiledCondition:
    """A parsed condition paired with the template it selects."""

    source: str
    template: str
    expression: Expression

    def matches(self, params: Params) -> bool:
        return is_truthy(self.expression.evaluate(params))

    def __call__(self, params: Params) -> str | None:
        """Get the template if the condition holds, None (no match) otherwise.

        An empty template never counts as a match, so an untranslated
        condition falls through to later conditions and the base value.
        """
        if self.template and self.matches(params):
            return self.template
        return None


def compile_condition(source: str, template: str) -> CompiledCondition:
    """Compile one condition/template pair.

    Raises:
        PredicateSyntaxError: if the source is not a valid condition
    """
    return CompiledCondition(source=source, template=template, expression=parse_condition(source))


def compile_conditions(conditions: dict[str, str], entry_key: str = "") -> list[CompiledCondition]:
    """Compile conditions in declaration order, dropping any that fail.

    A dropped condition is logged and can never match.
    """
    compiled = []
    for source, template in conditions.items():
        try:
            compiled.append(compile_condition(source, template))
        except PredicateSyntaxError as e:
            logger.warning("[PREDICATE] Dropped condition for %s: %s", entry_key or "?", e)
    return compiled
