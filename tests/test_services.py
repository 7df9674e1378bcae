"""
Tests for the application services.
"""

from decimal import Decimal

import pytest

from recordkeeper.application.finance_service import (
    Account,
    BankTransferProcessor,
    FinanceService,
    SavingsAccount,
)
from recordkeeper.application.grading_service import GradingService
from recordkeeper.application.healthcare_service import HealthcareService
from recordkeeper.application.inventory_service import InventoryApp
from recordkeeper.application.warehouse_service import WarehouseManager
from recordkeeper.domain.entities import ElectronicItem, Transaction
from recordkeeper.domain.errors import ErrorKind, RecordError
from recordkeeper.infrastructure.persistent_log import PersistenceStatus


class TestWarehouseManager:
    """End-to-end warehouse scenarios."""

    @pytest.fixture
    def manager(self, writer, fixed_now):
        manager = WarehouseManager(writer)
        manager.seed_data(fixed_now)
        return manager

    def test_duplicate_add_keeps_three_items(self, manager):
        with pytest.raises(RecordError) as exc_info:
            manager.electronics.add(ElectronicItem(1, "Tablet", 5, "Apple", 12))
        assert exc_info.value.kind is ErrorKind.DUPLICATE_KEY
        assert len(manager.electronics) == 3

    def test_remove_missing_reports(self, manager, output):
        assert manager.remove_item_by_id(manager.groceries, 999) is False
        assert "Error removing item: Item with ID 999 not found." in output.getvalue()
        assert len(manager.groceries) == 3

    def test_remove_existing(self, manager, output):
        assert manager.remove_item_by_id(manager.groceries, 2) is True
        assert "Item ID 2 removed successfully." in output.getvalue()
        assert 2 not in manager.groceries

    def test_increase_stock(self, manager, output):
        assert manager.increase_stock(manager.electronics, 1, 5) is True
        assert manager.electronics.get_by_id(1).quantity == 15
        assert "New quantity: 15" in output.getvalue()

    def test_increase_stock_below_zero(self, manager, output):
        assert manager.increase_stock(manager.electronics, 1, -50) is False
        assert manager.electronics.get_by_id(1).quantity == 10
        assert "Quantity cannot be negative." in output.getvalue()

    def test_increase_stock_missing(self, manager):
        assert manager.increase_stock(manager.groceries, 42, 1) is False

    def test_demo_output(self, manager, output):
        manager.run_demo()
        text = output.getvalue()
        assert "--- Grocery Items ---" in text
        assert "[ID: 1] Laptop (Dell) - Qty: 10, Warranty: 24 months" in text
        assert "[ID: 1] Milk - Qty: 50, Expiry: 2024-03-22" in text
        assert "Duplicate error: Item with ID 1 already exists." in text
        assert "Quantity error: Quantity cannot be negative." in text
        assert len(manager.electronics) == 3


class TestHealthcareService:
    """Tests for patient and prescription lookups."""

    @pytest.fixture
    def app(self, writer, fixed_now):
        app = HealthcareService(writer)
        app.seed_data(fixed_now)
        app.build_prescription_index()
        return app

    def test_prescriptions_grouped_by_patient(self, app):
        assert [p.id for p in app.prescriptions_for(1)] == [1, 2, 5]
        assert [p.id for p in app.prescriptions_for(3)] == [4]
        assert app.prescriptions_for(99) == ()

    def test_print_all_patients(self, app, output):
        app.print_all_patients()
        assert "[ID: 2] Bob Smith, Age: 45, Gender: Male" in output.getvalue()

    def test_prompt_valid_id(self, app, output):
        assert app.prompt_for_prescriptions(lambda prompt: "2") is True
        text = output.getvalue()
        assert "--- Prescriptions for Patient ID: 2 ---" in text
        assert "[Prescription ID: 3] Metformin - Issued on 2024-02-24" in text

    def test_prompt_unknown_id(self, app, output):
        app.prompt_for_prescriptions(lambda prompt: "42")
        assert "No prescriptions found for this patient." in output.getvalue()

    def test_prompt_invalid_id(self, app, output):
        assert app.prompt_for_prescriptions(lambda prompt: "abc") is False
        assert output.getvalue().strip() == "Invalid ID entered."

    @pytest.mark.parametrize("raw", ["0_1", "\u0661", "1.0", ""])
    def test_prompt_rejects_loose_integers(self, app, output, raw):
        """Only an optional sign and ASCII digits count as a patient id."""
        assert app.prompt_for_prescriptions(lambda prompt: raw) is False
        assert output.getvalue().strip() == "Invalid ID entered."

    def test_prompt_trims_whitespace(self, app, output):
        assert app.prompt_for_prescriptions(lambda prompt: " 3 \n") is True
        assert "Lisinopril" in output.getvalue()


class TestFinance:
    """Tests for processors and accounts."""

    def test_processor_message(self, fixed_now):
        message = BankTransferProcessor().process(
            Transaction(2, fixed_now, Decimal("150"), "Utilities")
        )
        assert message == "[Bank Transfer] Processing $150.00 for Utilities"

    def test_account_allows_overdraft(self, fixed_now):
        account = Account("ACC1", Decimal("100"))
        account.apply_transaction(Transaction(1, fixed_now, Decimal("150"), "Rent"))
        assert account.balance == Decimal("-50")

    def test_savings_refuses_overdraft(self, fixed_now):
        account = SavingsAccount("ACC2", Decimal("100"))
        message = account.apply_transaction(Transaction(1, fixed_now, Decimal("150"), "Rent"))
        assert message == "Insufficient funds."
        assert account.balance == Decimal("100")

    def test_run_processes_all_before_applying(self, writer, output, fixed_now):
        """All processing messages are printed before any balance update."""
        FinanceService(writer).run(fixed_now)
        lines = output.getvalue().splitlines()
        assert [line.split("]")[0] for line in lines[:3]] == [
            "[Mobile Money",
            "[Bank Transfer",
            "[Crypto Wallet",
        ]
        assert lines[3] == "Transaction successful. Updated balance: $800.00"
        assert lines[5] == "Transaction successful. Updated balance: $600.00"

    def test_run(self, writer, output, fixed_now):
        service = FinanceService(writer)
        account = service.run(fixed_now)
        assert account.balance == Decimal("600")
        assert [t.id for t in service.transactions.list_all()] == [1, 2, 3]
        assert "[Crypto Wallet] Processing $50.00 for Entertainment" in output.getvalue()
        assert "Updated balance: $600.00" in output.getvalue()


class TestInventoryApp:
    def test_save_and_reload_in_new_session(self, tmp_path, writer, output, fixed_now):
        path = str(tmp_path / "inventory.json")
        app = InventoryApp(path, writer)
        app.seed_sample_data(fixed_now)
        assert app.save_data().status is PersistenceStatus.SAVED

        new_app = InventoryApp(path, writer)
        assert new_app.load_data().status is PersistenceStatus.LOADED
        new_app.print_all_items()

        assert new_app.log.list_all() == app.log.list_all()
        assert "ID: 5, Name: Printer, Quantity: 3, Date Added: 2024-03-15 09:30:00" in output.getvalue()

    def test_load_without_file(self, tmp_path, writer, output):
        app = InventoryApp(str(tmp_path / "none.json"), writer)
        assert app.load_data().status is PersistenceStatus.NO_DATA
        assert "No saved data found." in output.getvalue()


class TestGradingService:
    """Tests for report generation."""

    def test_report_lines(self, tmp_path):
        source = tmp_path / "students.txt"
        report = tmp_path / "report.txt"
        source.write_text("7,Jane Doe,85\n8, John Roe ,49\n", encoding="utf-8")

        count = GradingService(str(source), str(report)).generate_report()

        assert count == 2
        assert report.read_text(encoding="utf-8").splitlines() == [
            "Jane Doe (ID: 7): Score = 85, Grade = A",
            "John Roe (ID: 8): Score = 49, Grade = F",
        ]

    def test_bad_line_writes_no_report(self, tmp_path):
        source = tmp_path / "students.txt"
        report = tmp_path / "report.txt"
        source.write_text("7,Jane Doe,85\n8,John Roe\n", encoding="utf-8")

        with pytest.raises(RecordError) as exc_info:
            GradingService(str(source), str(report)).generate_report()

        assert exc_info.value.kind is ErrorKind.MISSING_FIELD
        assert not report.exists()

    def test_paths_from_settings(self, monkeypatch):
        monkeypatch.setenv("RECORDKEEPER_STUDENTS_FILE", "in.txt")
        monkeypatch.setenv("RECORDKEEPER_REPORT_FILE", "out.txt")
        service = GradingService()
        assert service.input_file_path == "in.txt"
        assert service.output_file_path == "out.txt"
