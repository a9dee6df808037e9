from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from movies_api.db.base import Base
from movies_api.models import CreatedAtMixin


NAME_MAX_LENGTH = 100
# INTEGER primary key, 32 bit signed on postgres
ID_MIN = -2**31
ID_MAX = 2**31 - 1


class Movie(Base, CreatedAtMixin):
    __table_args__ = (
        # VARCHAR length is not enforced by every backend (sqlite)
        CheckConstraint(f"length(name) BETWEEN 1 AND {NAME_MAX_LENGTH}", name="ck_movies_name_length"),
    )
    # id and created_at come back from the INSERT itself (RETURNING where supported)
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    year_of_release: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Movie(id={self.id!r}, name={self.name!r}, year_of_release={self.year_of_release!r})"
