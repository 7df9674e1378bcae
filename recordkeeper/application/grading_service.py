"""Application service turning a student results file into a grade report."""

import logging
from typing import Optional

from recordkeeper.application.report_writer import write_grade_report
from recordkeeper.config import get_settings
from recordkeeper.infrastructure.student_parser import read_students

logger = logging.getLogger(__name__)


class GradingService:
    """Reads student results and writes the graded report."""

    def __init__(self, input_file_path: Optional[str] = None, output_file_path: Optional[str] = None):
        """
        Initialize grading service.

        Args:
            input_file_path: Student results file. If None, uses settings.
            output_file_path: Report file. If None, uses settings.
        """
        settings = get_settings()
        self.input_file_path = input_file_path or settings.students_file
        self.output_file_path = output_file_path or settings.report_file

    def generate_report(self) -> int:
        """
        Parse the input file and write the report.

        Any malformed line aborts the run before the report is written.

        Returns:
            Number of students in the report

        Raises:
            RecordError: on unreadable input, malformed lines or write failure
        """
        students = read_students(self.input_file_path)
        count = write_grade_report(students, self.output_file_path)
        logger.info(f"Report generated successfully: {self.output_file_path}")
        return count
