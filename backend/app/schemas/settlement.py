"""
Pydantic schemas for Settlement entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal
from app.schemas.balance import Money, ParticipantRef


class SettlementCreate(BaseModel):
    """Schema for settlement creation.

    Fields are optional here so that missing values surface as a ledger
    validation error with a specific reason instead of a generic 422.
    """
    from_id: Optional[str] = Field(default=None, alias="fromId")
    to_id: Optional[str] = Field(default=None, alias="toId")
    amount: Optional[Decimal] = None
    note: Optional[str] = None
    
    model_config = {"populate_by_name": True}


class SettlementResponse(BaseModel):
    """Schema for a recorded settlement."""
    id: str
    trip_id: str = Field(serialization_alias="tripId")
    from_id: str = Field(serialization_alias="fromId")
    to_id: str = Field(serialization_alias="toId")
    amount: Money
    note: Optional[str] = None
    settled_at: Optional[datetime] = Field(default=None, serialization_alias="settledAt")
    created_at: datetime = Field(serialization_alias="createdAt")
    from_participant: ParticipantRef = Field(serialization_alias="from")
    to_participant: ParticipantRef = Field(serialization_alias="to")
    
    model_config = {"from_attributes": True}
