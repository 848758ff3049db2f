"""Onboarding questionnaire and per-category cost estimates."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass

from .models import ExpenseCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionnaireQuestion:
    field: str  # UserProfile attribute the answer fills
    question: str
    hint: str
    min_value: float
    max_value: float
    default_value: float

    def clamp(self, value: float) -> float:
        return min(max(value, self.min_value), self.max_value)


QUESTIONNAIRE: tuple[QuestionnaireQuestion, ...] = (
    QuestionnaireQuestion(
        field="coffee_cost",
        question="How much do you typically spend on coffee?",
        hint="Think about your average coffee purchase",
        min_value=1,
        max_value=15,
        default_value=5,
    ),
    QuestionnaireQuestion(
        field="lunch_cost",
        question="What's your usual lunch cost?",
        hint="Average workday lunch",
        min_value=5,
        max_value=30,
        default_value=12,
    ),
    QuestionnaireQuestion(
        field="dinner_cost",
        question="How much do you spend on dinner?",
        hint="Average dinner out or takeout",
        min_value=10,
        max_value=50,
        default_value=20,
    ),
    QuestionnaireQuestion(
        field="groceries_weekly",
        question="What's your weekly grocery budget?",
        hint="Total weekly grocery shopping",
        min_value=30,
        max_value=300,
        default_value=100,
    ),
    QuestionnaireQuestion(
        field="transportation_monthly",
        question="Monthly transportation costs?",
        hint="Gas, transit passes, rideshare",
        min_value=20,
        max_value=500,
        default_value=150,
    ),
)

# Working days used to spread the monthly transportation budget per trip
_WORKING_DAYS_PER_MONTH = 20


@dataclass
class UserProfile:
    """Spending habits collected during onboarding."""

    coffee_cost: float = 0.0
    lunch_cost: float = 0.0
    dinner_cost: float = 0.0
    groceries_weekly: float = 0.0
    transportation_monthly: float = 0.0

    @classmethod
    def empty(cls) -> UserProfile:
        return cls()

    @classmethod
    def from_answers(cls, answers: Mapping[str, float]) -> UserProfile:
        """Build a profile from questionnaire answers.

        Missing answers take the question default; every answer is clamped
        to the question's range.
        """
        values = {}
        for q in QUESTIONNAIRE:
            raw = answers.get(q.field, q.default_value)
            values[q.field] = q.clamp(float(raw))
        return cls(**values)

    def estimated_costs(self) -> dict[ExpenseCategory, float]:
        """Typical single-expense cost for every category."""
        transport_per_trip = self.transportation_monthly / _WORKING_DAYS_PER_MONTH
        avg_meal = (self.lunch_cost + self.dinner_cost) / 2
        spending_level = (self.coffee_cost + self.lunch_cost + self.dinner_cost) / 3

        return {
            ExpenseCategory.COFFEE: self.coffee_cost,
            ExpenseCategory.LUNCH: self.lunch_cost,
            ExpenseCategory.DINNER: self.dinner_cost,
            ExpenseCategory.GROCERIES: self.groceries_weekly / 7,
            ExpenseCategory.TRANSPORTATION: transport_per_trip,
            ExpenseCategory.GAS: self.transportation_monthly / 4,
            ExpenseCategory.SNACKS: avg_meal * 0.35,
            ExpenseCategory.FAST_FOOD: avg_meal,
            ExpenseCategory.DRINKS: self.coffee_cost * 1.2,
            ExpenseCategory.ENTERTAINMENT: self.dinner_cost * 1.5,
            ExpenseCategory.SHOPPING: self.groceries_weekly * 0.5,
            ExpenseCategory.PARKING: transport_per_trip * 0.5,
            ExpenseCategory.UTILITIES: spending_level * 3,
            ExpenseCategory.HEALTHCARE: self.dinner_cost * 3,
            ExpenseCategory.SUBSCRIPTIONS: self.coffee_cost * 3,
            ExpenseCategory.OTHER: avg_meal,
        }


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def rounded_estimate(estimate: float) -> float:
    """Round an estimate to a step that suits its size.

    Below 5 rounds to the nearest 1, below 20 to the nearest 5, below 50 to
    the nearest 10 and anything larger to the nearest 20.
    """
    if estimate < 5:
        return _round_half_up(estimate)
    if estimate < 20:
        return _round_half_up(estimate / 5) * 5
    if estimate < 50:
        return _round_half_up(estimate / 10) * 10
    return _round_half_up(estimate / 20) * 20


class ProfileManager:
    """Holds the user's profile and onboarding state."""

    def __init__(
        self, profile: UserProfile | None = None, has_completed_onboarding: bool = False
    ) -> None:
        self.profile = profile or UserProfile.empty()
        self.has_completed_onboarding = has_completed_onboarding

    def update_profile(self, profile: UserProfile) -> None:
        self.profile = profile
        logger.info("Profile updated")

    def complete_onboarding(self) -> None:
        self.has_completed_onboarding = True

    def reset_onboarding(self) -> None:
        self.has_completed_onboarding = False

    def estimated_cost(self, category: ExpenseCategory) -> float:
        return self.profile.estimated_costs().get(category, 0.0)

    def rounded_estimate(self, category: ExpenseCategory) -> float:
        return rounded_estimate(self.estimated_cost(category))
