"""SQLAlchemy ORM models for credit entities."""

from datetime import date, datetime

from sqlalchemy import (
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    String,
    Text,
    text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ConsumerModel(Base):
    """Persisted consumer record."""

    __tablename__ = "consumers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    legal_name: Mapped[str] = mapped_column(String(255), nullable=False)
    place_of_birth: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    salary_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    nik: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    ktp_image_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    selfie_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class MerchantModel(Base):
    """Persisted merchant record."""

    __tablename__ = "merchants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    merchant_type: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class ConsumerLimitModel(Base):
    """Persisted credit line; one live row per (consumer, tenure)."""

    __tablename__ = "consumer_limits"
    __table_args__ = (
        Index(
            "uq_consumer_limits_consumer_tenure_live",
            "consumer_id",
            "tenure",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    consumer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("consumers.id"),
        nullable=False,
        index=True,
    )
    tenure: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    limit_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class LoanModel(Base):
    """Persisted loan record."""

    __tablename__ = "loans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    consumer_limit_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("consumer_limits.id"),
        nullable=False,
    )
    consumer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("consumers.id"),
        nullable=False,
        index=True,
    )
    merchant_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("merchants.id"),
        nullable=False,
    )
    principal_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    principal_paid_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    contract_number: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    interest_rate: Mapped[float] = mapped_column(Float, nullable=False)
    interest_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    interest_paid_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="on_going")
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    installment: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    asset_name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class TransactionModel(Base):
    """Persisted ledger entry. Append-only."""

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    consumer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("consumers.id"),
        nullable=False,
    )
    loan_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("loans.id"),
        nullable=False,
        index=True,
    )
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=datetime.utcnow,
    )
