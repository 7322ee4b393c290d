"""Models package - Import all models for SQLAlchemy registration."""
from app.models.trip import Trip, TripParticipant
from app.models.expense import Expense, ExpenseSplit
from app.models.settlement import Settlement

__all__ = [
    "Trip",
    "TripParticipant",
    "Expense",
    "ExpenseSplit",
    "Settlement",
]
