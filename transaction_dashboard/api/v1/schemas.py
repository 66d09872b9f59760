"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class TransactionRow(BaseModel):
    """Single row of the transaction table"""

    id: str
    type: str
    amount: float
    status: str
    description: str
    created_at: datetime
    buyer_id: Optional[str] = None
    buyer_name: Optional[str] = None
    seller_id: Optional[str] = None
    seller_name: Optional[str] = None
    property_id: Optional[str] = None
    property_title: Optional[str] = None

    # Render-ready fields
    display_amount: str
    display_date: str
    amount_tone: str
    status_tone: str


class StatsSchema(BaseModel):
    """Raw summary numbers over the role-scoped set"""

    total_transactions: int
    total_amount: float
    success_rate: float
    pending_amount: float


class StatCardSchema(BaseModel):
    key: str
    title: str
    value: str
    tone: str


class ChartPointSchema(BaseModel):
    name: str
    amount: float
    count: int


class ChartSchema(BaseModel):
    """Series for one chart card"""

    title: str
    subtitle: str
    type: str  # "area" | "bar"
    data_key: str
    x_axis_data_key: str = "name"
    data: List[ChartPointSchema]


class NotificationSchema(BaseModel):
    level: str
    message: str


class TransactionDashboardResponse(BaseModel):
    """Response for GET /v1/transactions"""

    user_id: str
    role: str
    loading: bool
    currency: str
    stats: StatsSchema
    cards: List[StatCardSchema]
    charts: List[ChartSchema]
    total_count: int
    transactions: List[TransactionRow]
    notifications: List[NotificationSchema]
