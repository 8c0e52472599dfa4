"""Criterion evaluators for lender qualification."""

from .business_evaluator import BusinessEvaluator
from .credit_evaluator import CreditEvaluator
from .geographic_evaluator import GeographicEvaluator, parse_state_list
from .history_evaluator import HistoryEvaluator
from .loan_evaluator import LoanEvaluator

__all__ = [
    "BusinessEvaluator",
    "CreditEvaluator",
    "GeographicEvaluator",
    "HistoryEvaluator",
    "LoanEvaluator",
    "parse_state_list",
]
