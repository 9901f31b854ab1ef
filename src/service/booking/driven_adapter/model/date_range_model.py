from datetime import date, datetime

from sqlalchemy import BigInteger, Boolean, Date, DateTime, Integer, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base


class DateRangeModel(Base):
    __tablename__ = 'product_dates'

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    # Plain value reference, products may be registered after their date ranges
    product_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    available_seats: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text('0')
    )
    booked_seats: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text('0')
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text('true')
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
