"""Application service for patient and prescription records."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple

from recordkeeper.application.report_writer import ReportWriter
from recordkeeper.domain.entities import Patient, Prescription
from recordkeeper.infrastructure.group_index import GroupIndex
from recordkeeper.infrastructure.repository import Repository
from recordkeeper.infrastructure.text_fields import parse_integer

logger = logging.getLogger(__name__)


class HealthcareService:
    """Holds patients and prescriptions and looks up prescriptions per patient."""

    def __init__(self, writer: Optional[ReportWriter] = None):
        self.writer = writer or ReportWriter()
        self.patients: Repository[Patient] = Repository()
        self.prescriptions: Repository[Prescription] = Repository()
        self.prescription_index: GroupIndex[Prescription] = GroupIndex()

    def seed_data(self, now: Optional[datetime] = None):
        now = now or datetime.now()

        self.patients.add(Patient(1, "Alice Johnson", 30, "Female"))
        self.patients.add(Patient(2, "Bob Smith", 45, "Male"))
        self.patients.add(Patient(3, "Catherine Lee", 29, "Female"))

        self.prescriptions.add(Prescription(1, 1, "Amoxicillin", now - timedelta(days=10)))
        self.prescriptions.add(Prescription(2, 1, "Ibuprofen", now - timedelta(days=5)))
        self.prescriptions.add(Prescription(3, 2, "Metformin", now - timedelta(days=20)))
        self.prescriptions.add(Prescription(4, 3, "Lisinopril", now - timedelta(days=2)))
        self.prescriptions.add(Prescription(5, 1, "Vitamin D", now))

        logger.info(
            f"Seeded {len(self.patients)} patients and {len(self.prescriptions)} prescriptions"
        )

    def build_prescription_index(self):
        """Rebuild the patient id -> prescriptions index from the repository."""
        self.prescription_index = GroupIndex.build(
            self.prescriptions.list_all(), key=lambda p: p.patient_id
        )
        logger.debug(f"Prescription index covers {len(self.prescription_index)} patients")

    def prescriptions_for(self, patient_id: int) -> Tuple[Prescription, ...]:
        return self.prescription_index.members(patient_id)

    def print_all_patients(self):
        self.writer.heading("All Patients")
        self.writer.entities(self.patients.list_all())

    def print_prescriptions_for_patient(self, patient_id: int):
        self.writer.heading(f"Prescriptions for Patient ID: {patient_id}")
        prescriptions = self.prescription_index.lookup(patient_id)
        if prescriptions is None:
            self.writer.line("No prescriptions found for this patient.")
            return
        self.writer.entities(prescriptions)

    def prompt_for_prescriptions(self, read_input: Callable[[str], str] = input) -> bool:
        """
        Ask for a patient id and print that patient's prescriptions.

        Args:
            read_input: Prompt function, input() by default

        Returns:
            False if the entered id was not numeric
        """
        raw = read_input("\nEnter Patient ID to view prescriptions: ")
        patient_id = parse_integer(raw)
        if patient_id is None:
            logger.warning(f"Rejected non-numeric patient id: {raw!r}")
            self.writer.line("Invalid ID entered.")
            return False

        self.print_prescriptions_for_patient(patient_id)
        return True
