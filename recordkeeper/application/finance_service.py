"""Application service for transaction processing and account balances."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from recordkeeper.application.report_writer import ReportWriter, format_money
from recordkeeper.domain.entities import Transaction
from recordkeeper.infrastructure.repository import Repository

logger = logging.getLogger(__name__)


class TransactionProcessor:
    """Base processor; subclasses name the payment channel."""

    channel = "Generic"

    def process(self, transaction: Transaction) -> str:
        message = (
            f"[{self.channel}] Processing {format_money(transaction.amount)} "
            f"for {transaction.category}"
        )
        logger.info(message)
        return message


class BankTransferProcessor(TransactionProcessor):
    channel = "Bank Transfer"


class MobileMoneyProcessor(TransactionProcessor):
    channel = "Mobile Money"


class CryptoWalletProcessor(TransactionProcessor):
    channel = "Crypto Wallet"


class Account:
    """Account whose balance is reduced by each applied transaction."""

    def __init__(self, account_number: str, initial_balance: Decimal):
        self.account_number = account_number
        self.balance = Decimal(initial_balance)

    def apply_transaction(self, transaction: Transaction) -> str:
        self.balance -= transaction.amount
        return f"Transaction applied. New balance: {format_money(self.balance)}"


class SavingsAccount(Account):
    """Account that refuses transactions larger than its balance."""

    def apply_transaction(self, transaction: Transaction) -> str:
        if transaction.amount > self.balance:
            logger.warning(
                f"Insufficient funds on {self.account_number} for transaction {transaction.id}"
            )
            return "Insufficient funds."
        self.balance -= transaction.amount
        return f"Transaction successful. Updated balance: {format_money(self.balance)}"


class FinanceService:
    """Processes sample transactions against a savings account."""

    def __init__(self, writer: Optional[ReportWriter] = None):
        self.writer = writer or ReportWriter()
        self.transactions: Repository[Transaction] = Repository()

    def process(self, transaction: Transaction, processor: TransactionProcessor):
        self.writer.line(processor.process(transaction))

    def apply(self, transaction: Transaction, account: Account):
        """Apply a transaction to account and keep it."""
        self.writer.line(account.apply_transaction(transaction))
        self.transactions.add(transaction)

    def run(self, now: Optional[datetime] = None) -> SavingsAccount:
        now = now or datetime.now()
        account = SavingsAccount("ACC123", Decimal("1000"))

        batch: List[tuple] = [
            (Transaction(1, now, Decimal("200"), "Groceries"), MobileMoneyProcessor()),
            (Transaction(2, now, Decimal("150"), "Utilities"), BankTransferProcessor()),
            (Transaction(3, now, Decimal("50"), "Entertainment"), CryptoWalletProcessor()),
        ]
        # Every transaction is processed before any is applied
        for transaction, processor in batch:
            self.process(transaction, processor)
        for transaction, _ in batch:
            self.apply(transaction, account)

        logger.info(
            f"Processed {len(self.transactions)} transactions, "
            f"final balance {format_money(account.balance)}"
        )
        return account
