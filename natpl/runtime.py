from __future__ import annotations

import decimal
import logging
from typing import Optional

from natpl.config import decimal_context
from natpl.errors import NatplError
from natpl.evaluation.classifier import classify
from natpl.evaluation.evaluator import evaluate
from natpl.evaluation.statement import EMPTY, EvalResult, eval_item
from natpl.syntax import Expression, Item, LineItem
from natpl.types.name import Name
from natpl.types.state import EvaluationState
from natpl.types.value import Value

logger = logging.getLogger(__name__)


class Runtime:
    """
    One evaluation session: owns an EvaluationState and feeds parsed lines
    through classification and evaluation.
    Not thread-safe; give each session its own Runtime.
    """

    def __init__(self, context: decimal.Context | None = None):
        self.state: EvaluationState = EvaluationState()
        # Resolve configuration once per session
        self.context: decimal.Context = context or decimal_context()

    def eval_line_item(self, line: LineItem) -> EvalResult:
        item = self.line_item_to_item(line)
        if item is None:
            return EMPTY
        return self.eval_item(item)

    def line_item_to_item(self, line: LineItem) -> Optional[Item]:
        return classify(line, self.state)

    def eval_item(self, item: Item) -> EvalResult:
        try:
            return eval_item(item, self.state, self.context)
        except NatplError as err:
            logger.debug("statement failed: %s", err)
            raise

    def eval_expr(self, expr: Expression) -> Value:
        return evaluate(expr, self.state, self.context)

    def lookup(self, name: Name | str) -> Optional[Value]:
        return self.state.lookup(name if isinstance(name, Name) else Name(name))
