"""Personal expense tracking: categories, onboarding estimates, ledger."""

from .interval import DEFAULT_INTERVALS, IntervalInput
from .ledger import FinanceLedger
from .models import ExpenseCategory, Transaction
from .profile import (
    QUESTIONNAIRE,
    ProfileManager,
    QuestionnaireQuestion,
    UserProfile,
    rounded_estimate,
)

__all__ = [
    "ExpenseCategory",
    "Transaction",
    "FinanceLedger",
    "UserProfile",
    "ProfileManager",
    "QuestionnaireQuestion",
    "QUESTIONNAIRE",
    "rounded_estimate",
    "IntervalInput",
    "DEFAULT_INTERVALS",
]
