"""
Balance service: loads a trip's ledger records and runs the computation.
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from app.core.exceptions import NotFoundError, StorageFailureError
from app.models.trip import Trip, TripParticipant
from app.models.expense import Expense
from app.models.settlement import Settlement
from app.schemas.balance import (
    BalanceResponse,
    LedgerExpense,
    LedgerParticipant,
    LedgerSettlement,
)
from app.services.ledger_service import compute_balances, plan_transactions

logger = logging.getLogger(__name__)


def get_trip_balance(trip_id: str, db: Session) -> BalanceResponse:
    """
    Compute net balances and suggested transactions for a trip.
    Raises NotFoundError if the trip does not exist and StorageFailureError
    if the records cannot be read.
    """
    try:
        trip = db.query(Trip).filter(Trip.id == trip_id).first()
        if not trip:
            raise NotFoundError("Trip not found")

        participants = db.query(TripParticipant).filter(
            TripParticipant.trip_id == trip_id
        ).order_by(TripParticipant.created_at, TripParticipant.id).all()

        if not participants:
            return BalanceResponse(balances=[], transactions=[])

        expenses = db.query(Expense).options(
            selectinload(Expense.splits)
        ).filter(Expense.trip_id == trip_id).all()

        settlements = db.query(Settlement).filter(
            Settlement.trip_id == trip_id
        ).all()

        ledger_participants = [LedgerParticipant.model_validate(p) for p in participants]
        ledger_expenses = [LedgerExpense.model_validate(e) for e in expenses]
        ledger_settlements = [LedgerSettlement.model_validate(s) for s in settlements]
    except SQLAlchemyError as e:
        logger.error(f"Failed to load ledger records for trip {trip_id}: {e}", exc_info=True)
        raise StorageFailureError("Failed to compute balance") from e

    logger.debug(
        f"Computing balance for trip {trip_id}: {len(ledger_participants)} participants, "
        f"{len(ledger_expenses)} expenses, {len(ledger_settlements)} settlements"
    )
    balances = compute_balances(ledger_participants, ledger_expenses, ledger_settlements)
    transactions = plan_transactions(balances)

    return BalanceResponse(balances=balances, transactions=transactions)
