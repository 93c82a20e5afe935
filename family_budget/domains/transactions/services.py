import datetime
import logging
from typing import Callable, List, Optional, Tuple

from family_budget.config.setting import settings
from family_budget.domains.transactions.models import Transaction
from family_budget.shared.clock import format_ja_date, format_ja_datetime, local_now

Clock = Callable[[], datetime.datetime]


class TimestampIdGenerator:
    """Millisecond epoch ids, bumped when two records share a millisecond."""

    def __init__(self):
        self.last_id = 0

    def next_id(self, moment: datetime.datetime) -> str:
        millis = int(moment.timestamp() * 1000)
        if millis <= self.last_id:
            millis = self.last_id + 1
        self.last_id = millis
        return str(millis)


class TransactionManager:
    """
    In-memory list of one kind of transaction plus the running balance.

    New records go to the front of the list. The balance moves by ``sign * amount``
    on every add. Records are never edited or removed.
    """

    kind = "transaction"
    sign = 1

    def __init__(self, initial_balance: int = 0, clock: Clock = local_now):
        self.clock = clock
        self.ids = TimestampIdGenerator()
        self._transactions: List[Transaction] = []
        self._balance = initial_balance

    def add(self, amount: int) -> Transaction:
        """
        Record a new transaction for an already validated positive amount.

        :param amount: Amount in yen.
        :return: The stored Transaction.
        """
        moment = self.clock()
        transaction = Transaction(
            id=self.ids.next_id(moment),
            amount=amount,
            timestamp=format_ja_datetime(moment),
        )
        self._transactions.insert(0, transaction)
        self._balance += self.sign * amount
        logging.info(f"Added {self.kind} {transaction.id}: amount={amount}, balance={self._balance}")
        return transaction

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def total(self) -> int:
        return sum(t.amount for t in self._transactions)


class ExpenseManager(TransactionManager):
    kind = "expense"
    sign = -1

    def __init__(self, initial_balance: Optional[int] = None, clock: Clock = local_now):
        if initial_balance is None:
            initial_balance = settings.expense_initial_balance
        super().__init__(initial_balance, clock)


class IncomeManager(TransactionManager):
    kind = "income"
    sign = 1

    def __init__(self, initial_balance: Optional[int] = None, clock: Clock = local_now):
        if initial_balance is None:
            initial_balance = settings.income_initial_balance
        super().__init__(initial_balance, clock)


class BudgetManager:
    """Dated expenses and incomes kept together; balance is income minus expense."""

    def __init__(self, clock: Clock = local_now):
        self.clock = clock
        self.ids = TimestampIdGenerator()
        self._expenses: List[Transaction] = []
        self._incomes: List[Transaction] = []

    def _record(self, amount: int, date: str) -> Transaction:
        day = datetime.date.fromisoformat(date)
        return Transaction(
            id=self.ids.next_id(self.clock()),
            amount=amount,
            timestamp=format_ja_date(day),
        )

    def add_expense(self, amount: int, date: str) -> Transaction:
        expense = self._record(amount, date)
        self._expenses.insert(0, expense)
        logging.info(f"Added expense {expense.id} on {date}: amount={amount}")
        return expense

    def add_income(self, amount: int, date: str) -> Transaction:
        income = self._record(amount, date)
        self._incomes.insert(0, income)
        logging.info(f"Added income {income.id} on {date}: amount={amount}")
        return income

    @property
    def expenses(self) -> Tuple[Transaction, ...]:
        return tuple(self._expenses)

    @property
    def incomes(self) -> Tuple[Transaction, ...]:
        return tuple(self._incomes)

    @property
    def total_expense(self) -> int:
        return sum(e.amount for e in self._expenses)

    @property
    def total_income(self) -> int:
        return sum(i.amount for i in self._incomes)

    @property
    def balance(self) -> int:
        return self.total_income - self.total_expense
