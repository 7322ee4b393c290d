"""
Settlement service for recording payments between trip participants.
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError, StorageFailureError, ValidationFailedError
from app.models.settlement import Settlement
from app.models.trip import Trip, TripParticipant
from app.schemas.settlement import SettlementCreate, SettlementResponse
from app.services.ledger_service import round_money

logger = logging.getLogger(__name__)


def validate_settlement_input(data: SettlementCreate) -> None:
    """Check the request body on its own, before any database access."""
    if not data.from_id or not data.to_id or data.amount is None:
        raise ValidationFailedError("fromId, toId, and amount are required")
    # Amounts are stored in cents; anything finer would be silently rounded
    if data.amount <= 0 or data.amount != round_money(data.amount):
        raise ValidationFailedError("amount must be a positive number")
    if data.from_id == data.to_id:
        raise ValidationFailedError("fromId and toId must be different participants")


def _get_trip_participant(participant_id: str, trip_id: str, db: Session):
    participant = db.query(TripParticipant).filter(
        TripParticipant.id == participant_id
    ).first()
    if not participant or participant.trip_id != trip_id:
        return None
    return participant


def create_settlement(trip_id: str, data: SettlementCreate, db: Session) -> SettlementResponse:
    """
    Record a settlement on a trip.
    Nothing is written unless every precondition holds. The response is
    built before commit, so once the commit succeeds the call succeeds.
    """
    try:
        validate_settlement_input(data)

        trip = db.query(Trip).filter(Trip.id == trip_id).first()
        if not trip:
            raise NotFoundError("Trip not found")

        from_participant = _get_trip_participant(data.from_id, trip_id, db)
        if not from_participant:
            raise ValidationFailedError("fromId participant not found on this trip")
        to_participant = _get_trip_participant(data.to_id, trip_id, db)
        if not to_participant:
            raise ValidationFailedError("toId participant not found on this trip")

        settlement = Settlement(
            trip_id=trip_id,
            from_id=data.from_id,
            to_id=data.to_id,
            amount=data.amount,
            note=data.note,
            from_participant=from_participant,
            to_participant=to_participant
        )
        db.add(settlement)
        db.flush()
        response = SettlementResponse.model_validate(settlement)
        db.commit()
    except ValidationFailedError as e:
        logger.info(f"Rejected settlement for trip {trip_id}: {e.message}")
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create settlement for trip {trip_id}: {e}", exc_info=True)
        raise StorageFailureError("Failed to create settlement") from e

    logger.info(
        f"Recorded settlement {response.id} on trip {trip_id}: "
        f"{response.from_id} -> {response.to_id} {response.amount}"
    )
    return response
