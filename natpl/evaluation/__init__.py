"""Classification and evaluation of natpl statements and expressions."""

from natpl.evaluation.classifier import classify
from natpl.evaluation.evaluator import evaluate
from natpl.evaluation.statement import eval_item, EvalResult, EMPTY, ValueResult, PrintValue
