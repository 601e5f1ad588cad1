"""
Balance service computing trip totals and per-participant positions.
"""
from sqlalchemy.orm import Session
from typing import Dict, Iterable, List, Sequence
from decimal import Decimal, ROUND_HALF_UP
from app.core.exceptions import TripNotFoundError
from app.models.bill import Bill
from app.models.participant import Participant
from app.models.trip import Trip

UNKNOWN_USERNAME = "Unknown"
CENTS = Decimal("0.01")


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class BalanceStrategy:
    """Decides how much each participant owes the group."""
    name = None

    def amount_owed(self, participant, total_cost: Decimal, participant_count: int) -> Decimal:
        raise NotImplementedError


class StoredBalanceStrategy(BalanceStrategy):
    """Uses the amount_owed already recorded on the participant."""
    name = "stored"

    def amount_owed(self, participant, total_cost: Decimal, participant_count: int) -> Decimal:
        return _to_decimal(participant.amount_owed)


class EqualSplitBalanceStrategy(BalanceStrategy):
    """Splits the total cost evenly across all participants."""
    name = "equal_split"

    def amount_owed(self, participant, total_cost: Decimal, participant_count: int) -> Decimal:
        if not participant_count:
            return Decimal(0)
        return (total_cost / participant_count).quantize(CENTS, rounding=ROUND_HALF_UP)


BALANCE_STRATEGIES = {
    StoredBalanceStrategy.name: StoredBalanceStrategy,
    EqualSplitBalanceStrategy.name: EqualSplitBalanceStrategy,
}


def get_balance_strategy(name: str) -> BalanceStrategy:
    """Resolve a strategy by its configured name."""
    try:
        return BALANCE_STRATEGIES[name]()
    except KeyError:
        raise ValueError(f"Unknown balance strategy: {name!r}") from None


def compute_total_cost(bills: Iterable) -> Decimal:
    """Exact sum of bill amounts."""
    return sum((_to_decimal(bill.amount) for bill in bills), Decimal(0))


def compute_balances(
    participants: Sequence,
    total_cost: Decimal,
    strategy: BalanceStrategy
) -> List[Dict]:
    """
    Compute each participant's position, preserving input order.

    balance = amount_paid - amount_owed; positive means the group owes the
    participant, negative means the participant owes the group.
    """
    count = len(participants)
    balances = []
    for participant in participants:
        amount_paid = _to_decimal(participant.amount_paid)
        amount_owed = strategy.amount_owed(participant, total_cost, count)
        user = participant.user
        balances.append({
            "user_id": participant.user_id,
            "username": user.username if user is not None else UNKNOWN_USERNAME,
            "amount_paid": amount_paid,
            "amount_owed": amount_owed,
            "balance": amount_paid - amount_owed,
        })
    return balances


def aggregate_trip_balances(trip_id: int, db: Session, strategy: BalanceStrategy) -> Dict:
    """
    Load bills and participants for a trip and compute its totals.

    Returns {"bills", "total_cost", "balances"}; bills are returned so callers
    composing a detail view don't load them twice. Read-only.
    """
    if db.get(Trip, trip_id) is None:
        raise TripNotFoundError()

    bills = db.query(Bill).filter(Bill.trip_id == trip_id).order_by(Bill.id).all()
    participants = db.query(Participant).filter(
        Participant.trip_id == trip_id
    ).order_by(Participant.id).all()

    total_cost = compute_total_cost(bills)
    return {
        "bills": bills,
        "total_cost": total_cost,
        "balances": compute_balances(participants, total_cost, strategy),
    }
