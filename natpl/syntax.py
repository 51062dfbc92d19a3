"""Syntax trees consumed by the natpl evaluation core.

The parser (not part of this package) produces one LineItem per input line.
Every node carries an FC span which the core never inspects; it is only copied
into raised errors so the caller can point at the offending text.

Line items and statements share node classes where their shape is identical:
UnitDeclaration, PrintedExpression and SilentExpression are both. The only
line item that is not yet a statement is DeclarationOrEquality, whose meaning
depends on the names already known to the session (see
natpl.evaluation.classifier).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from natpl.types.name import Name


@dataclass(frozen=True)
class FC:
    """Source span: character offsets into the parsed line."""
    start: int = 0
    end: int = 0


@dataclass(frozen=True)
class Identifier:
    fc: FC
    name: Name

    @classmethod
    def of(cls, text: str, fc: FC | None = None) -> Identifier:
        return cls(fc or FC(), Name(text))


# -----------------------------------------------------
# Operators
# -----------------------------------------------------

class PrefixOp(Enum):
    POS = "+"
    NEG = "-"


class InfixOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"
    EQ = "="
    NEQ = "!="
    GT = ">"


class SiPrefix(Enum):
    FEMTO = "f"
    PICO = "p"
    NANO = "n"
    MICRO = "u"
    MILLI = "m"
    CENTI = "c"
    DECI = "d"
    DECA = "da"
    HECTO = "h"
    KILO = "k"
    MEGA = "M"
    GIGA = "G"
    TERA = "T"
    PETA = "P"

    @property
    def exponent(self) -> int:
        """Power of ten this prefix scales a magnitude by."""
        return _SI_EXPONENTS[self]

    @classmethod
    def split_name(cls, text: str) -> Optional[tuple[SiPrefix, str]]:
        """Split ``text`` into (prefix, base name), e.g. "ms" -> (MILLI, "s").

        "da" is tried before "d", so "dam" is deca-metre. Returns None when no
        prefix matches or nothing would be left of the base name.
        """
        for symbol in _SYMBOLS_LONGEST_FIRST:
            if text.startswith(symbol) and len(text) > len(symbol):
                return _SI_SYMBOLS[symbol], text[len(symbol):]
        return None


_SI_EXPONENTS = {
    SiPrefix.FEMTO: -15,
    SiPrefix.PICO: -12,
    SiPrefix.NANO: -9,
    SiPrefix.MICRO: -6,
    SiPrefix.MILLI: -3,
    SiPrefix.CENTI: -2,
    SiPrefix.DECI: -1,
    SiPrefix.DECA: 1,
    SiPrefix.HECTO: 2,
    SiPrefix.KILO: 3,
    SiPrefix.MEGA: 6,
    SiPrefix.GIGA: 9,
    SiPrefix.TERA: 12,
    SiPrefix.PETA: 15,
}

_SI_SYMBOLS = {p.value: p for p in SiPrefix}
_SI_SYMBOLS["µ"] = SiPrefix.MICRO  # MICRO SIGN
_SI_SYMBOLS["μ"] = SiPrefix.MICRO  # GREEK SMALL LETTER MU
_SYMBOLS_LONGEST_FIRST = sorted(_SI_SYMBOLS, key=len, reverse=True)


# -----------------------------------------------------
# Expressions
# -----------------------------------------------------

@dataclass(frozen=True)
class IntegerLit:
    fc: FC
    val: Decimal


@dataclass(frozen=True)
class DecimalLit:
    fc: FC
    val: Decimal


@dataclass(frozen=True)
class MaybeUnitPrefix:
    """A bare name that may also read as SI prefix + base name.

    `full_name` is the text as written ("ms"); `name` is the base name left
    after stripping `prefix` ("s").
    """
    fc: FC
    name: Name
    full_name: Name
    prefix: SiPrefix

    @classmethod
    def from_name(cls, text: str, fc: FC | None = None) -> Expression:
        """Build the node a parser emits for a bare name.

        Falls back to a plain Variable when the text has no SI prefix.
        """
        fc = fc or FC()
        split = SiPrefix.split_name(text)
        if split is None:
            return Variable(Identifier(fc, Name(text)))
        prefix, base = split
        return cls(fc, Name(base), Name(text), prefix)


@dataclass(frozen=True)
class Variable:
    ident: Identifier

    @property
    def fc(self) -> FC:
        return self.ident.fc


@dataclass(frozen=True)
class Call:
    fc: FC
    base: Expression
    args: tuple[Expression, ...]


@dataclass(frozen=True)
class PrefixOperation:
    fc: FC
    op: PrefixOp
    expr: Expression


@dataclass(frozen=True)
class InfixOperation:
    fc: FC
    op: InfixOp
    lhs: Expression
    rhs: Expression


@dataclass(frozen=True)
class UnitOf:
    fc: FC
    expr: Expression


@dataclass(frozen=True)
class Parenthesised:
    fc: FC
    expr: Expression


Expression = Union[
    IntegerLit,
    DecimalLit,
    MaybeUnitPrefix,
    Variable,
    Call,
    PrefixOperation,
    InfixOperation,
    UnitOf,
    Parenthesised,
]


# -----------------------------------------------------
# Statements
# -----------------------------------------------------

@dataclass(frozen=True)
class UnitDeclaration:
    fc: FC
    name: Identifier


@dataclass(frozen=True)
class VariableDeclaration:
    fc: FC
    name: Identifier
    rhs: Expression


@dataclass(frozen=True)
class FunctionDeclaration:
    fc: FC
    name: Identifier
    arg_names: tuple[Identifier, ...]
    rhs: Expression


@dataclass(frozen=True)
class PrintedExpression:
    fc: FC
    expr: Expression


@dataclass(frozen=True)
class SilentExpression:
    expr: Expression


Item = Union[
    UnitDeclaration,
    VariableDeclaration,
    FunctionDeclaration,
    PrintedExpression,
    SilentExpression,
]


# -----------------------------------------------------
# Line items
# -----------------------------------------------------

@dataclass(frozen=True)
class EmptyLine:
    fc: FC = FC()


@dataclass(frozen=True)
class DeclarationOrEquality:
    """``name = rhs`` or ``name(args) = rhs``.

    A declaration when `name` is new to the session, otherwise an equality
    test against the existing binding. `arg_names` is None for the
    variable form.
    """
    fc: FC
    name: Identifier
    arg_names: Optional[tuple[Identifier, ...]]
    rhs: Expression

    def declaration_name(self) -> Name:
        return self.name.name

    def into_declaration(self) -> Item:
        if self.arg_names is None:
            return VariableDeclaration(self.fc, self.name, self.rhs)
        return FunctionDeclaration(self.fc, self.name, self.arg_names, self.rhs)

    def into_expression(self) -> Item:
        lhs: Expression = Variable(self.name)
        if self.arg_names is not None:
            lhs = Call(self.fc, lhs, tuple(Variable(a) for a in self.arg_names))
        return PrintedExpression(self.fc, InfixOperation(self.fc, InfixOp.EQ, lhs, self.rhs))


LineItem = Union[
    EmptyLine,
    UnitDeclaration,
    DeclarationOrEquality,
    PrintedExpression,
    SilentExpression,
]
