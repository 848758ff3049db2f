"""Price recognition, stepped gesture controls and expense tracking."""

from .config import (
    FinanceConfig,
    NotesConfig,
    PennypadConfig,
    SliderConfig,
    TiltConfig,
    load_config,
)
from .finance import (
    ExpenseCategory,
    FinanceLedger,
    IntervalInput,
    ProfileManager,
    Transaction,
    UserProfile,
)
from .gestures import (
    FeedbackIntensity,
    GestureSession,
    NumberSlider,
    StepResult,
    SteppedGestureMapper,
    StopPoint,
    TiltButton,
)
from .notes import PriceExtractor, ShoppingItem, ShoppingList, extract_price

__all__ = [
    "PriceExtractor",
    "extract_price",
    "ShoppingItem",
    "ShoppingList",
    "StopPoint",
    "SteppedGestureMapper",
    "GestureSession",
    "StepResult",
    "FeedbackIntensity",
    "NumberSlider",
    "TiltButton",
    "ExpenseCategory",
    "Transaction",
    "FinanceLedger",
    "UserProfile",
    "ProfileManager",
    "IntervalInput",
    "PennypadConfig",
    "NotesConfig",
    "SliderConfig",
    "TiltConfig",
    "FinanceConfig",
    "load_config",
]
