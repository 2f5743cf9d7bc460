from typing import Dict, Iterable
from splitledger.core.utils import NOISE_EPS, SETTLE_EPS
from splitledger.schemas.expense import Expense


def compute_net(users: Iterable[str], expenses: Iterable[Expense]) -> Dict[str, float]:
    """
    Net balance per user, keyed by name in sorted order.

    net = total paid - total owed, so a positive number means the user
    should receive money and a negative one means they should pay.
    Every registered user is present, even with no expenses.
    """
    net: Dict[str, float] = {u: 0.0 for u in users}

    for exp in expenses:
        # payer fronted the whole amount
        net[exp.payer] = net.get(exp.payer, 0.0) + exp.amount

        for name, share in exp.shares.items():
            net[name] = net.get(name, 0.0) - share

    # clamp float noise
    return {
        name: (0.0 if abs(bal) < NOISE_EPS else bal)
        for name, bal in sorted(net.items())
    }


def is_settled(net: Dict[str, float], tolerance: float = SETTLE_EPS) -> bool:
    """
    A ledger is settled if abs(net_balance) <= tolerance for every user.
    """
    for amount in net.values():
        if abs(amount) > tolerance:
            return False

    return True
