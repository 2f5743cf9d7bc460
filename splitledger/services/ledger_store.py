from typing import Dict, Iterable, List, Tuple
from splitledger.schemas.expense import Expense
from splitledger.schemas.settlements import Settlement
from splitledger.services.expense_services import build_equal_split, build_exact_split, ShareToken
from splitledger.services.balance_service import compute_net
from splitledger.services.settlement_service import settle


class LedgerStore:
    """
    In-memory owner of the registered users and the recorded expenses.

    The store itself never validates what it is given; expenses must come
    from the builders in expense_services (record_* does that for you).
    Balances and settlements are recomputed on every call.
    """

    def __init__(self):
        # dict keeps registration order
        self._users: Dict[str, None] = {}
        self._expenses: List[Expense] = []

    # users

    def register_user(self, name: str) -> None:
        self._users.setdefault(name, None)

    def is_user(self, name: str) -> bool:
        return name in self._users

    @property
    def users(self) -> Tuple[str, ...]:
        return tuple(self._users)

    # expenses

    def append(self, expense: Expense) -> None:
        self._expenses.append(expense)

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return tuple(self._expenses)

    def record_equal_expense(self, payer: str, amount: float, participants: List[str]) -> Expense:
        expense = build_equal_split(self, payer, amount, participants)
        self.append(expense)
        return expense

    def record_exact_expense(self, payer: str, amount: float, tokens: Iterable[ShareToken]) -> Expense:
        expense = build_exact_split(self, payer, amount, tokens)
        self.append(expense)
        return expense

    # derived

    def get_balances(self) -> Dict[str, float]:
        return compute_net(self._users, self._expenses)

    def get_settlement(self) -> List[Settlement]:
        return settle(self.get_balances())

    # wholesale state changes, used by the loaders

    def clear(self) -> None:
        self._users.clear()
        self._expenses.clear()

    def replace(self, users: Iterable[str], expenses: Iterable[Expense]) -> None:
        new_users = dict.fromkeys(users)
        new_expenses = list(expenses)
        self._users = new_users
        self._expenses = new_expenses

    def __len__(self):
        return len(self._expenses)
