from sqlalchemy import Integer, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from app.database import Base


class WorldometerTotalSum(Base):
    __tablename__ = "worldometers_total_sum"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    total_cases: Mapped[int | None] = mapped_column(Integer, nullable=True)
    new_cases: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_deaths: Mapped[int | None] = mapped_column(Integer, nullable=True)
    new_deaths: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_recovered: Mapped[int | None] = mapped_column(Integer, nullable=True)
    active_cases: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_cases_per_million_pop: Mapped[float | None] = mapped_column(
        Float, nullable=True
    )

    last_updated: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, index=True
    )
