"""
Pydantic schemas for ledger inputs and balance/transaction results.
"""
from pydantic import BaseModel, Field, PlainSerializer
from typing import Annotated, List, Optional
from decimal import Decimal

# Decimal internally, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class LedgerParticipant(BaseModel):
    """Participant as read by the aggregator."""
    id: str
    name: str
    
    model_config = {"from_attributes": True}


class LedgerSplit(BaseModel):
    """A participant's share of an expense."""
    participant_id: str
    amount: Decimal
    
    model_config = {"from_attributes": True}


class LedgerExpense(BaseModel):
    """Expense with its optional payer and splits."""
    id: str
    amount: Decimal
    paid_by_participant_id: Optional[str] = None
    splits: List[LedgerSplit] = []
    
    model_config = {"from_attributes": True}


class LedgerSettlement(BaseModel):
    """Payment already made from a debtor to a creditor."""
    from_id: str
    to_id: str
    amount: Decimal
    
    model_config = {"from_attributes": True}


class ParticipantRef(BaseModel):
    """Minimal participant reference in responses."""
    id: str
    name: str
    
    model_config = {"from_attributes": True}


class Balance(BaseModel):
    """Net balance of one participant (positive = owed money by the group)."""
    participant_id: str = Field(serialization_alias="participantId")
    name: str
    net: Money


class Transaction(BaseModel):
    """Suggested payment that helps zero out the ledger."""
    from_participant: ParticipantRef = Field(serialization_alias="from")
    to_participant: ParticipantRef = Field(serialization_alias="to")
    amount: Money


class BalanceResponse(BaseModel):
    """Schema for the trip balance response."""
    balances: List[Balance] = []
    transactions: List[Transaction] = []
