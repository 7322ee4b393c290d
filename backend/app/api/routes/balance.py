"""
Trip balance routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.exceptions import NotFoundError, StorageFailureError
from app.db.session import get_db
from app.schemas.balance import BalanceResponse
from app.services.balance_service import get_trip_balance
from app.services.ledger_service import summarize_plan

router = APIRouter(prefix="/trips", tags=["balance"])


def load_balance(trip_id: str, db: Session) -> BalanceResponse:
    """Run the balance computation, mapping service errors to HTTP errors."""
    try:
        return get_trip_balance(trip_id, db)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message
        )
    except StorageFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message
        )


@router.get("/{trip_id}/balance", response_model=BalanceResponse)
async def get_balance(
    trip_id: str,
    db: Session = Depends(get_db)
):
    """Get net balances and suggested transactions for a trip."""
    return load_balance(trip_id, db)


@router.get("/{trip_id}/balance/summary", response_class=PlainTextResponse)
async def get_balance_summary(
    trip_id: str,
    db: Session = Depends(get_db)
):
    """Get the settlement plan as plain text."""
    result = load_balance(trip_id, db)
    return summarize_plan(result.balances, result.transactions, settings.CURRENCY)
