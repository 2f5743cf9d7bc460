import logging
from sqlalchemy import select, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from splitledger.core.exceptions import CorruptPersistedState, SnapshotUnavailable
from splitledger.models.ledger_user import LedgerUser
from splitledger.models.ledger_expense import LedgerExpense, ExpenseShare
from splitledger.schemas.expense import Expense

logger = logging.getLogger(__name__)


def save_snapshot(db: Session, store) -> None:
    """
    Overwrites whatever snapshot is in the database with the store's
    current users and expenses, in a single transaction.
    """
    try:
        db.execute(delete(ExpenseShare))
        db.execute(delete(LedgerExpense))
        db.execute(delete(LedgerUser))

        db.add_all(
            LedgerUser(name=name, position=i)
            for i, name in enumerate(store.users)
        )

        for i, exp in enumerate(store.expenses):
            row = LedgerExpense(position=i, payer=exp.payer, amount=exp.amount)
            row.shares = [
                ExpenseShare(name=name, amount=amount)
                for name, amount in sorted(exp.shares.items())
            ]
            db.add(row)

        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("could not save snapshot: %s", e)
        raise SnapshotUnavailable("Cannot write snapshot to database.")

    logger.info("snapshot saved: %d users / %d expenses", len(store.users), len(store.expenses))


def load_snapshot(db: Session, store) -> None:
    """
    Replaces the store with the snapshot held in the database.

    An unreachable database leaves the store untouched; a snapshot with
    dangling names clears it, same as a corrupt text file.
    """
    try:
        users = db.scalars(
            select(LedgerUser.name).order_by(LedgerUser.position)
        ).all()

        rows = db.scalars(
            select(LedgerExpense)
            .options(selectinload(LedgerExpense.shares))
            .order_by(LedgerExpense.position)
        ).all()
    except SQLAlchemyError as e:
        logger.warning("could not load snapshot: %s", e)
        raise SnapshotUnavailable("Cannot read snapshot from database.")

    store.clear()
    known = set(users)

    expenses = []
    for row in rows:
        if row.payer not in known:
            raise CorruptPersistedState("expense header")

        shares = {}
        for s in row.shares:
            if s.name not in known:
                raise CorruptPersistedState("share entry")
            shares[s.name] = s.amount

        expenses.append(Expense(payer=row.payer, amount=row.amount, shares=shares))

    store.replace(users, expenses)
    logger.info("snapshot loaded: %d users / %d expenses", len(users), len(expenses))


def snapshot_counts(db: Session) -> dict:
    return {
        "users": db.scalar(select(func.count(LedgerUser.id))),
        "expenses": db.scalar(select(func.count(LedgerExpense.id))),
    }
