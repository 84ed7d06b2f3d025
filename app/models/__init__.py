"""
SQLAlchemy ORM models package.

All models are imported here so that Base.metadata knows every table
before create_all runs, and other modules can import from app.models
directly.
"""

from app.models.payment_detail import PaymentDetail  # noqa: F401
