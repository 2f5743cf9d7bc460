import heapq
from typing import Dict, List, Tuple
from splitledger.core.utils import SETTLE_EPS
from splitledger.schemas.settlements import Settlement


def settle(net_map: Dict[str, float], eps: float = SETTLE_EPS) -> List[Settlement]:
    """
    Greedy min-cash-flow: repeatedly match the largest creditor with the
    largest debtor and move min(credit, debt) between them.

    Produces at most (creditors + debtors - 1) transfers. Not guaranteed
    minimal for every distribution. Equal balances are popped in name order.
    """
    # heapq is a min-heap: creditors keyed on -balance, debtors on balance
    # (most negative first)
    creditors: List[Tuple[float, str]] = []
    debtors: List[Tuple[float, str]] = []

    for name, bal in net_map.items():
        if bal > eps:
            creditors.append((-bal, name))
        elif bal < -eps:
            debtors.append((bal, name))

    heapq.heapify(creditors)
    heapq.heapify(debtors)

    transfers: List[Settlement] = []

    while creditors and debtors:
        neg_cred, cred_name = heapq.heappop(creditors)
        debt, debt_name = heapq.heappop(debtors)
        cred = -neg_cred

        pay = min(cred, -debt)

        if pay > eps:
            transfers.append(Settlement(from_user=debt_name, to_user=cred_name, amount=pay))

        cred -= pay
        debt += pay

        if cred > eps:
            heapq.heappush(creditors, (-cred, cred_name))
        if debt < -eps:
            heapq.heappush(debtors, (debt, debt_name))

    return transfers
