"""
Settlement recording routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError, StorageFailureError, ValidationFailedError
from app.db.session import get_db
from app.schemas.settlement import SettlementCreate, SettlementResponse
from app.services.settlement_service import create_settlement

router = APIRouter(prefix="/trips", tags=["settlements"])


@router.post(
    "/{trip_id}/settlements",
    response_model=SettlementResponse,
    status_code=status.HTTP_201_CREATED
)
async def record_settlement(
    trip_id: str,
    settlement_data: SettlementCreate,
    db: Session = Depends(get_db)
):
    """Record a payment made from one participant to another."""
    try:
        settlement = create_settlement(trip_id, settlement_data, db)
    except ValidationFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
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
    
    return settlement
