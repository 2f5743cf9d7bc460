import math
from typing import Dict, Iterable, List, Tuple, Union
from splitledger.core.exceptions import (
    EmptyParticipants,
    EmptyShares,
    InvalidAmount,
    MalformedToken,
    ShareMismatch,
    UnknownUser,
)
from splitledger.core.utils import SHARE_TOLERANCE
from splitledger.schemas.expense import Expense

# "name:amount" as typed on the command line, or an already split pair
ShareToken = Union[str, Tuple[str, float]]


def _ensure_payer(store, payer: str):
    if not store.is_user(payer):
        raise UnknownUser(payer, role="payer")


def _ensure_amount(amount: float):
    if not math.isfinite(amount):
        raise InvalidAmount(amount)


def parse_share_token(token: ShareToken) -> Tuple[str, float]:
    """
    "bob:12.50" -> ("bob", 12.5). Splits on the first colon only.
    """
    if isinstance(token, str):
        text = token
        name, sep, raw = token.partition(":")
        if not sep:
            raise MalformedToken(text)
    else:
        try:
            name, raw = token
        except (TypeError, ValueError):
            raise MalformedToken(str(token))
        text = f"{name}:{raw}"

    try:
        share = float(raw)
    except (TypeError, ValueError):
        raise MalformedToken(text)

    if not math.isfinite(share):
        raise MalformedToken(text)

    return str(name), share


# working fine
def build_equal_split(store, payer: str, amount: float, participants: List[str]) -> Expense:
    _ensure_payer(store, payer)
    _ensure_amount(amount)

    if not participants:
        raise EmptyParticipants()

    for p in participants:
        if not store.is_user(p):
            raise UnknownUser(p)

    share = amount / len(participants)

    # a name listed twice owes two shares
    shares: Dict[str, float] = {}
    for p in participants:
        shares[p] = shares.get(p, 0.0) + share

    return Expense(payer=payer, amount=amount, shares=shares)


# working fine
def build_exact_split(store, payer: str, amount: float, tokens: Iterable[ShareToken]) -> Expense:
    _ensure_payer(store, payer)
    _ensure_amount(amount)

    tokens = list(tokens)
    if not tokens:
        raise EmptyShares()

    shares: Dict[str, float] = {}
    share_sum = 0.0

    # tokens are checked in the order given, first failure wins
    for t in tokens:
        name, share = parse_share_token(t)
        if not store.is_user(name):
            raise UnknownUser(name)
        shares[name] = shares.get(name, 0.0) + share
        share_sum += share

    if abs(share_sum - amount) > SHARE_TOLERANCE:
        raise ShareMismatch(share_sum, amount)

    return Expense(payer=payer, amount=amount, shares=shares)
