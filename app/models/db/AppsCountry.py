from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base


class AppsCountry(Base):
    __tablename__ = "apps_countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    country_code: Mapped[str] = mapped_column(String(3), nullable=False, index=True)
    country_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # name as it appears in worldometers.country; several aliases can share a code
    country_alias: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True
    )
