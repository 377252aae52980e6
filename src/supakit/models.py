"""
supakit - Row Models.

Subclass TableModel to describe a table's rows:

    class Movie(TableModel):
        __table_name__ = "movies"

        id: int | None = None
        name: str
        created_at: datetime | None = None

    response = await execute(from_(client, Movie).select("*"))
    movies = rows(response, Movie)
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class TableModel(BaseModel):
    """Base class for row models bound to a table."""

    __table_name__: ClassVar[str] = ""

    # Unknown columns are dropped
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def table_name(cls) -> str:
        if not cls.__table_name__:
            raise TypeError(f"{cls.__name__} does not set __table_name__")
        return cls.__table_name__

    def to_row(self, *, exclude: set[str] | None = None) -> dict[str, Any]:
        """JSON-ready column dict for insert/update. Unset (None) columns are left out."""
        return self.model_dump(mode="json", exclude_none=True, exclude=exclude, by_alias=True)
