from sqlalchemy import String, Integer, Float, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from app.database import Base


class Worldometer(Base):
    """One scraped snapshot of a country's figures. Rows are only ever appended."""

    __tablename__ = "worldometers"
    __table_args__ = (
        Index("ix_worldometers_country_last_updated", "country", "last_updated"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False)

    total_cases: Mapped[int | None] = mapped_column(Integer, nullable=True)
    new_cases: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_deaths: Mapped[int | None] = mapped_column(Integer, nullable=True)
    new_deaths: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_recovered: Mapped[int | None] = mapped_column(Integer, nullable=True)
    active_cases: Mapped[int | None] = mapped_column(Integer, nullable=True)
    serious_critical_cases: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_cases_per_million_pop: Mapped[float | None] = mapped_column(
        Float, nullable=True
    )

    last_updated: Mapped[datetime] = mapped_column(DateTime, nullable=False)
