"""
supakit Contacts - Row models.

Maps to the contacts table in supabase/migrations/.
"""

from pydantic import EmailStr, Field

from supakit.models import TableModel


class Contact(TableModel):
    """A row of the contacts table. id is None until inserted."""

    __table_name__ = "contacts"

    id: int | None = None
    first: str = Field(min_length=1)
    last: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: EmailStr

    @property
    def full_name(self) -> str:
        return f"{self.first} {self.last}"

    def matches(self, term: str) -> bool:
        """Case-insensitive match on first or last name."""
        term = term.casefold()
        return term in self.first.casefold() or term in self.last.casefold()
