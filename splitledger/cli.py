import logging
import math
import sys
from typing import Dict, List
from sqlalchemy.exc import SQLAlchemyError
from splitledger.core.config import settings
from splitledger.core.exceptions import LedgerError, SnapshotUnavailable
from splitledger.core.utils import fmt_amount
from splitledger.schemas.settlements import Settlement
from splitledger.services.ledger_store import LedgerStore
from splitledger.db.session import SessionLocal, init_db
from splitledger.services.persistence import save_ledger, load_ledger
from splitledger.services.snapshot_services import save_snapshot, load_snapshot

logger = logging.getLogger(__name__)

HELP = """Commands:
  add-user <name>
  add-expense equal <payer> <amount> <p1> <p2> ...
  add-expense exact <payer> <amount> <name1:share1> <name2:share2> ...
  balances
  settle
  save <file>
  load <file>
  save-db
  load-db
  help
  exit
"""


def format_balances(net: Dict[str, float]) -> str:
    lines = ["Balances (+ receive, - pay)"]
    for name, amount in net.items():
        lines.append(f"  {name:<12} : {fmt_amount(amount)}")
    return "\n".join(lines) + "\n"


def format_settlement(txns: List[Settlement]) -> str:
    if not txns:
        return "Everyone is settled.\n"
    lines = ["Settlement transactions:"]
    for t in txns:
        lines.append(f"  {t.from_user} -> {t.to_user} : {fmt_amount(t.amount)}")
    return "\n".join(lines) + "\n"


class Shell:
    """
    Line-oriented front end over a single LedgerStore.

    handle() takes one command line and returns False once the user asks
    to leave. All output goes to `out`.
    """

    def __init__(self, ledger: LedgerStore = None, out=None, session_factory=None):
        self.ledger = ledger if ledger is not None else LedgerStore()
        self.out = out if out is not None else sys.stdout
        self._session_factory = session_factory

    def write(self, text: str):
        self.out.write(text)

    def handle(self, line: str) -> bool:
        parts = line.split()
        if not parts:
            return True

        cmd, args = parts[0], parts[1:]

        if cmd in ("exit", "quit"):
            return False

        handler = getattr(self, "do_" + cmd.replace("-", "_"), None)
        if handler is None:
            self.write("Unknown command. Type 'help'.\n")
            return True

        try:
            handler(line, args)
        except LedgerError as e:
            self.write(f"Error: {e.message}\n")

        return True

    def do_help(self, line, args):
        self.write(HELP)

    def do_add_user(self, line, args):
        name = line.strip()[len("add-user"):].strip()
        if not name:
            self.write("Usage: add-user <name>\n")
            return
        self.ledger.register_user(name)
        self.write(f"Added user: {name}\n")

    def do_add_expense(self, line, args):
        usage = "Usage: add-expense equal|exact ...  (see 'help')\n"
        if len(args) < 3 or args[0] not in ("equal", "exact"):
            self.write(usage)
            return

        kind, payer, raw_amount, rest = args[0], args[1], args[2], args[3:]
        try:
            amount = float(raw_amount)
        except ValueError:
            self.write(usage)
            return
        if not math.isfinite(amount):
            self.write(usage)
            return

        if kind == "equal":
            self.ledger.record_equal_expense(payer, amount, rest)
            self.write("Added equal expense.\n")
        else:
            self.ledger.record_exact_expense(payer, amount, rest)
            self.write("Added exact expense.\n")

    def do_balances(self, line, args):
        self.write(format_balances(self.ledger.get_balances()))

    def do_settle(self, line, args):
        self.write(format_settlement(self.ledger.get_settlement()))

    def do_save(self, line, args):
        if not args:
            self.write("Usage: save <file>\n")
            return
        save_ledger(self.ledger, args[0])
        self.write(f"Saved to {args[0]}\n")

    def do_load(self, line, args):
        if not args:
            self.write("Usage: load <file>\n")
            return
        load_ledger(self.ledger, args[0])
        self.write(f"Loaded from {args[0]}\n")

    def _session(self):
        if self._session_factory is None:
            try:
                init_db()
            except SQLAlchemyError as e:
                logger.warning("could not prepare database: %s", e)
                raise SnapshotUnavailable("Cannot open database.")
            self._session_factory = SessionLocal
        return self._session_factory()

    def do_save_db(self, line, args):
        with self._session() as db:
            save_snapshot(db, self.ledger)
        self.write("Saved to database.\n")

    def do_load_db(self, line, args):
        with self._session() as db:
            load_snapshot(db, self.ledger)
        self.write("Loaded from database.\n")

    def run(self, stdin=None):
        stdin = stdin if stdin is not None else sys.stdin
        self.write("Splitledger. Type 'help' for commands.\n")

        while True:
            self.write("> ")
            self.out.flush()
            line = stdin.readline()
            if not line:
                break
            if not self.handle(line.rstrip("\n")):
                break

        self.write("Bye!\n")


def main():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("starting shell")
    Shell().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
