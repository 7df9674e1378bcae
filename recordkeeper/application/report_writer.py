"""Human-readable text output for entities and reports."""

import logging
import sys
from decimal import Decimal
from typing import Iterable, Optional, TextIO

from recordkeeper.domain.entities import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
    Patient,
    Prescription,
    Student,
    Transaction,
)
from recordkeeper.domain.errors import ErrorKind, RecordError

logger = logging.getLogger(__name__)


def format_money(amount: Decimal) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_patient(patient: Patient) -> str:
    return f"[ID: {patient.id}] {patient.name}, Age: {patient.age}, Gender: {patient.gender}"


def format_prescription(prescription: Prescription) -> str:
    return (
        f"[Prescription ID: {prescription.id}] {prescription.medication_name} "
        f"- Issued on {prescription.date_issued:%Y-%m-%d}"
    )


def format_transaction(transaction: Transaction) -> str:
    return (
        f"[Transaction ID: {transaction.id}] {format_money(transaction.amount)} "
        f"for {transaction.category} on {transaction.date:%Y-%m-%d}"
    )


def format_inventory_item(item: InventoryItem) -> str:
    return (
        f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, "
        f"Date Added: {item.date_added:%Y-%m-%d %H:%M:%S}"
    )


def format_electronic_item(item: ElectronicItem) -> str:
    return (
        f"[ID: {item.id}] {item.name} ({item.brand}) - Qty: {item.quantity}, "
        f"Warranty: {item.warranty_months} months"
    )


def format_grocery_item(item: GroceryItem) -> str:
    return f"[ID: {item.id}] {item.name} - Qty: {item.quantity}, Expiry: {item.expiry_date:%Y-%m-%d}"


def format_student(student: Student) -> str:
    return (
        f"{student.full_name} (ID: {student.id}): "
        f"Score = {student.score}, Grade = {student.grade}"
    )


FORMATTERS = {
    Patient: format_patient,
    Prescription: format_prescription,
    Transaction: format_transaction,
    InventoryItem: format_inventory_item,
    ElectronicItem: format_electronic_item,
    GroceryItem: format_grocery_item,
    Student: format_student,
}


def format_entity(entity) -> str:
    formatter = FORMATTERS.get(type(entity))
    if formatter is None:
        return str(entity)
    return formatter(entity)


class ReportWriter:
    """Writes formatted lines to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def line(self, text: str = ""):
        self.stream.write(f"{text}\n")

    def heading(self, title: str):
        self.line()
        self.line(f"--- {title} ---")

    def entities(self, entities: Iterable):
        for entity in entities:
            self.line(format_entity(entity))


def write_grade_report(students: Iterable[Student], output_file_path: str) -> int:
    """
    Write one report line per student to output_file_path.

    Returns:
        Number of lines written

    Raises:
        RecordError: IO_FAILURE if the file cannot be written
    """
    # Format first so an out-of-range score leaves no partial file behind
    lines = [format_student(student) for student in students]
    try:
        with open(output_file_path, "w", encoding="utf-8") as f:
            for text in lines:
                f.write(f"{text}\n")
    except OSError as e:
        raise RecordError(
            ErrorKind.IO_FAILURE,
            f"Cannot write report file {output_file_path}: {e}",
            details={"path": output_file_path},
        ) from e

    logger.info(f"Wrote {len(lines)} report lines to {output_file_path}")
    return len(lines)
