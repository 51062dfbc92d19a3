"""Turns parsed line items into statements.

`x = 5` is ambiguous until names are resolved: it declares `x` when `x` is
new, and compares against the existing `x` otherwise. The answer depends on
the state left behind by earlier lines, so classify every line just before
evaluating it.
"""

from __future__ import annotations

import logging
from typing import Optional

from natpl.syntax import (
    DeclarationOrEquality,
    EmptyLine,
    Item,
    LineItem,
    PrintedExpression,
    SilentExpression,
    UnitDeclaration,
)
from natpl.types.state import EvaluationState

logger = logging.getLogger(__name__)


def classify(line: LineItem, state: EvaluationState) -> Optional[Item]:
    """Return the statement for `line`, or None for an empty line."""
    match line:
        case EmptyLine():
            return None
        case DeclarationOrEquality():
            name = line.declaration_name()
            if state.is_defined(name):
                logger.debug("%s is already defined; reading line as equality", name)
                return line.into_expression()
            return line.into_declaration()
        case UnitDeclaration() | PrintedExpression() | SilentExpression():
            return line
    raise TypeError(f"Cannot classify {line!r} as a line item")
