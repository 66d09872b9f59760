"""SQLAlchemy ORM model for the transactions collection"""

from sqlalchemy import Column, DateTime, Float, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TransactionRecord(Base):
    """One document of the transactions collection, stored as a row"""

    __tablename__ = "transactions"

    id = Column(Text, primary_key=True)
    type = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    status = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    buyer_id = Column(Text, nullable=True, index=True)
    buyer_name = Column(Text, nullable=True)
    seller_id = Column(Text, nullable=True, index=True)
    seller_name = Column(Text, nullable=True)
    property_id = Column(Text, nullable=True)
    property_title = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
