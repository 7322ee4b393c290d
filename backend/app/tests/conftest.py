"""
Shared fixtures: in-memory database, API client and record factories.
"""
import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import Trip, TripParticipant, Expense, ExpenseSplit, Settlement


@pytest.fixture
def db_session():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    """API client bound to the test database."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class LedgerFactory:
    """Creates trips, participants, expenses and settlements in the test database."""

    def __init__(self, db):
        self.db = db

    def trip(self, name="Lake House"):
        trip = Trip(name=name)
        self.db.add(trip)
        self.db.commit()
        return trip

    def participant(self, trip, name, **fields):
        participant = TripParticipant(trip_id=trip.id, name=name, **fields)
        self.db.add(participant)
        self.db.commit()
        return participant

    def expense(self, trip, payer, amount, splits):
        """``splits`` is a list of (participant, amount) pairs."""
        expense = Expense(
            trip_id=trip.id,
            paid_by_participant_id=payer.id if payer else None,
            amount=Decimal(str(amount))
        )
        self.db.add(expense)
        self.db.flush()
        for participant, share in splits:
            self.db.add(ExpenseSplit(
                expense_id=expense.id,
                participant_id=participant.id,
                amount=Decimal(str(share))
            ))
        self.db.commit()
        return expense

    def settlement(self, trip, from_participant, to_participant, amount):
        settlement = Settlement(
            trip_id=trip.id,
            from_id=from_participant.id,
            to_id=to_participant.id,
            amount=Decimal(str(amount))
        )
        self.db.add(settlement)
        self.db.commit()
        return settlement


@pytest.fixture
def factory(db_session):
    return LedgerFactory(db_session)
