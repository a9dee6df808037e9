from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
    """Base class for all models."""

    @declared_attr.directive
    def __tablename__(cls) -> str:
        """Plural, lower-cased class name: Movie -> movies."""
        return f"{cls.__name__.lower()}s"
