"""
Trip and participant models.
"""
from sqlalchemy import Column, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Trip(BaseModel):
    """Trip model representing a household travel event."""
    __tablename__ = "trips"
    
    name = Column(String(200), nullable=False)
    destination = Column(String(200), nullable=True)
    notes = Column(Text, nullable=True)
    
    # Relationships
    participants = relationship("TripParticipant", back_populates="trip", cascade="all, delete-orphan")
    expenses = relationship("Expense", back_populates="trip", cascade="all, delete-orphan")
    settlements = relationship("Settlement", back_populates="trip", cascade="all, delete-orphan")


class TripParticipant(BaseModel):
    """A person taking part in a trip's shared expenses."""
    __tablename__ = "trip_participants"
    __table_args__ = (
        UniqueConstraint("trip_id", "name", name="uq_trip_participant_name"),
    )
    
    trip_id = Column(String(36), ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=True)
    
    # Relationships
    trip = relationship("Trip", back_populates="participants")
    splits = relationship("ExpenseSplit", back_populates="participant", cascade="all, delete-orphan")
