"""
PaymentDetail model: a stored payment card record.

The card number column only ever holds the masked form produced by
app.security.mask_card_number ("************1111"). The service layer masks
on every write, so the full number never reaches the database.

Identifiers:
  payment_details_id is assigned by the database. On SQLite the table is
  created with AUTOINCREMENT so ids of deleted rows are never handed out
  again.

Optimistic concurrency:
  version_id is registered as the mapper's version_id_col. SQLAlchemy adds
  "AND version_id = :old" to every UPDATE/DELETE and bumps the counter; if
  another writer got there first no row matches and the flush raises
  StaleDataError.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class PaymentDetail(Base):
    __tablename__ = "payment_details"
    __table_args__ = {"sqlite_autoincrement": True}

    payment_details_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    card_owner_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    # Masked: 12 asterisks + last four digits
    card_number: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
    )

    # MM/YY
    expiration_date: Mapped[str] = mapped_column(
        String(5),
        nullable=False,
    )

    cvc: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
    )

    version_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self) -> str:
        return (
            f"<PaymentDetail id={self.payment_details_id} "
            f"card_number={self.card_number!r}>"
        )
