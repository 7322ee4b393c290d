"""
Expense model for tracking spending.
"""
from sqlalchemy import Column, String, Numeric, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single spending event."""
    __tablename__ = "expenses"
    
    trip_id = Column(String(36), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    # Nullable: an expense without a payer still debits its splits
    paid_by_participant_id = Column(
        String(36), ForeignKey("trip_participants.id", ondelete="SET NULL"), nullable=True, index=True
    )
    amount = Column(Numeric(15, 2), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=True)
    
    # Relationships
    trip = relationship("Trip", back_populates="expenses")
    payer = relationship("TripParticipant", foreign_keys=[paid_by_participant_id])
    splits = relationship("ExpenseSplit", back_populates="expense", cascade="all, delete-orphan")


class ExpenseSplit(BaseModel):
    """One participant's share of an expense."""
    __tablename__ = "expense_splits"
    __table_args__ = (
        UniqueConstraint("expense_id", "participant_id", name="uq_expense_split_participant"),
    )
    
    expense_id = Column(String(36), ForeignKey("expenses.id", ondelete="CASCADE"), nullable=False, index=True)
    participant_id = Column(String(36), ForeignKey("trip_participants.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    
    # Relationships
    expense = relationship("Expense", back_populates="splits")
    participant = relationship("TripParticipant", back_populates="splits")
