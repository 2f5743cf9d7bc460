"""
Plain-text save / load of a ledger.

Layout (amounts always written with two decimals):

    USERS <n>
    <user name>            x n
    EXPENSES <n>
    PAYER <name> AMT <amount>
    SHARES <m>
    <name> <amount>        x m

Loading replaces the whole ledger. The store is cleared before parsing
starts, so a corrupt file leaves it empty.
"""
import logging
import math
from pathlib import Path
from typing import Iterator, List, Tuple
from splitledger.core.exceptions import CorruptPersistedState, LedgerFileError
from splitledger.core.utils import fmt_amount
from splitledger.schemas.expense import Expense

logger = logging.getLogger(__name__)


def dumps(store) -> str:
    lines = [f"USERS {len(store.users)}"]
    lines.extend(store.users)

    lines.append(f"EXPENSES {len(store.expenses)}")
    for exp in store.expenses:
        lines.append(f"PAYER {exp.payer} AMT {fmt_amount(exp.amount)}")
        lines.append(f"SHARES {len(exp.shares)}")
        for name in sorted(exp.shares):
            lines.append(f"{name} {fmt_amount(exp.shares[name])}")

    return "\n".join(lines) + "\n"


def _parse_count(raw: str, section: str) -> int:
    try:
        n = int(raw)
    except ValueError:
        raise CorruptPersistedState(section)
    if n < 0:
        raise CorruptPersistedState(section)
    return n


def _parse_float(raw: str, section: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise CorruptPersistedState(section)
    if not math.isfinite(value):
        raise CorruptPersistedState(section)
    return value


def _parse_users(lines: List[str]) -> Tuple[List[str], int]:
    """
    Returns the user names and the index of the first line after them.
    """
    # leading blank lines are skipped, as whitespace before the header
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    if start >= len(lines):
        raise CorruptPersistedState("USERS")

    header = lines[start].split()
    if len(header) < 2 or header[0] != "USERS":
        raise CorruptPersistedState("USERS")
    n = _parse_count(header[1], "USERS")

    users: List[str] = []
    i = start + 1
    while len(users) < n:
        if i >= len(lines):
            raise CorruptPersistedState("USERS")
        name = lines[i].strip()
        i += 1
        # blank lines between names are skipped
        if name:
            users.append(name)

    return users, i


def _parse_expenses(tokens: Iterator[str], known: set) -> List[Expense]:
    def take(section):
        try:
            return next(tokens)
        except StopIteration:
            raise CorruptPersistedState(section)

    if take("EXPENSES") != "EXPENSES":
        raise CorruptPersistedState("EXPENSES")
    n = _parse_count(take("EXPENSES"), "EXPENSES")

    expenses: List[Expense] = []
    for _ in range(n):
        tag1, payer, tag2 = take("expense header"), take("expense header"), take("expense header")
        if tag1 != "PAYER" or tag2 != "AMT":
            raise CorruptPersistedState("expense header")
        amount = _parse_float(take("expense header"), "expense header")
        if payer not in known:
            raise CorruptPersistedState("expense header")

        if take("SHARES") != "SHARES":
            raise CorruptPersistedState("SHARES")
        m = _parse_count(take("SHARES"), "SHARES")

        shares = {}
        for _ in range(m):
            name = take("share entry")
            share = _parse_float(take("share entry"), "share entry")
            if name not in known:
                raise CorruptPersistedState("share entry")
            shares[name] = share

        expenses.append(Expense(payer=payer, amount=amount, shares=shares))

    return expenses


def loads(store, text: str) -> None:
    store.clear()

    lines = text.splitlines()
    users, rest = _parse_users(lines)
    tokens = iter(" ".join(lines[rest:]).split())
    expenses = _parse_expenses(tokens, set(users))

    store.replace(users, expenses)


def save_ledger(store, path) -> None:
    path = Path(path)
    try:
        path.write_text(dumps(store), encoding="utf-8")
    except OSError as e:
        logger.warning("could not write ledger to %s: %s", path, e)
        raise LedgerFileError("Cannot open file for writing.")

    logger.info("saved %d users / %d expenses to %s", len(store.users), len(store.expenses), path)


def load_ledger(store, path) -> None:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("could not read ledger from %s: %s", path, e)
        raise LedgerFileError("Cannot open file for reading.")

    try:
        loads(store, text)
    except CorruptPersistedState:
        logger.error("ledger file %s is corrupt, store left empty", path)
        raise

    logger.info("loaded %d users / %d expenses from %s", len(store.users), len(store.expenses), path)
