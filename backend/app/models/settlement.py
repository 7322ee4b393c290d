"""
Settlement model for payments already made between participants.
"""
from sqlalchemy import Column, String, Numeric, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from app.db.base import BaseModel, utcnow


class Settlement(BaseModel):
    """A recorded real-world payment from one participant to another."""
    __tablename__ = "settlements"
    
    trip_id = Column(String(36), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    from_id = Column(String(36), ForeignKey("trip_participants.id", ondelete="CASCADE"), nullable=False, index=True)
    to_id = Column(String(36), ForeignKey("trip_participants.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    note = Column(Text, nullable=True)
    settled_at = Column(DateTime(timezone=True), default=utcnow, nullable=True)
    
    # Relationships
    trip = relationship("Trip", back_populates="settlements")
    from_participant = relationship("TripParticipant", foreign_keys=[from_id])
    to_participant = relationship("TripParticipant", foreign_keys=[to_id])
