"""Domain entities for the record-keeping programs."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from recordkeeper.domain.errors import ErrorKind, RecordError

# Inclusive lower bounds, checked top-down
GRADE_THRESHOLDS = (
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)
MIN_SCORE = 0
MAX_SCORE = 100


def letter_grade(score: int) -> str:
    """
    Map a score to its letter grade.

    Args:
        score: Score in the closed range 0..100

    Returns:
        One of "A", "B", "C", "D" or "F"

    Raises:
        RecordError: INVALID_ARGUMENT if the score is out of range
    """
    if score < MIN_SCORE or score > MAX_SCORE:
        raise RecordError(
            ErrorKind.INVALID_ARGUMENT,
            f"Score {score} is outside {MIN_SCORE}..{MAX_SCORE}",
            details={"field": "score", "value": score},
        )
    for lower_bound, letter in GRADE_THRESHOLDS:
        if score >= lower_bound:
            return letter
    return "F"


@dataclass(frozen=True)
class Patient:
    """Immutable patient entity."""

    id: int
    name: str
    age: int
    gender: str


@dataclass(frozen=True)
class Prescription:
    """Immutable prescription entity, keyed to a patient by patient_id."""

    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime


@dataclass(frozen=True)
class Transaction:
    id: int
    date: datetime
    amount: Decimal
    category: str


@dataclass(frozen=True)
class InventoryItem:
    """Immutable inventory log record."""

    id: int
    name: str
    quantity: int
    date_added: datetime


@dataclass(frozen=True)
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int


@dataclass(frozen=True)
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: datetime


@dataclass(frozen=True)
class Student:
    """Immutable student result parsed from a grading input line."""

    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        return letter_grade(self.score)
