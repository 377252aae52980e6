"""
supakit Contacts - Contact Service.

CRUD over the contacts table. All queries go through supakit's client
wrappers, so the service works with either a Client or an AsyncClient.
"""

import logging
from typing import Any

from supakit.client import execute, from_, rows
from supakit.option import Nothing, Option, Some

from supakit_contacts.models import Contact

logger = logging.getLogger(__name__)

PAGE_SIZE = 5


class ContactService:
    """Contact operations against one Supabase client."""

    def __init__(self, client: Any):
        self.client = client

    def _contacts(self) -> Any:
        return from_(self.client, Contact)

    async def count(self) -> int:
        """Number of contacts."""
        response = await execute(self._contacts().select("id", count="exact"))
        if response.count is not None:
            return response.count
        return len(response.data)

    async def all(self) -> list[Contact]:
        """Every contact, ordered by id."""
        response = await execute(self._contacts().select("*").order("id"))
        return rows(response, Contact)

    async def search(self, term: str) -> list[Contact]:
        """Contacts whose first or last name contains `term`, ignoring case."""
        return [c for c in await self.all() if c.matches(term)]

    async def page(self, number: int) -> list[Contact]:
        """
        One page of contacts, PAGE_SIZE per page.

        Args:
            number: 1-based page number

        Raises:
            ValueError: number is less than 1
        """
        if number < 1:
            raise ValueError(f"Page numbers start at 1, got {number}")

        start = (number - 1) * PAGE_SIZE
        end = start + PAGE_SIZE - 1
        response = await execute(self._contacts().select("*").order("id").range(start, end))
        return rows(response, Contact)

    async def add(self, contact: Contact) -> Contact:
        """Insert a contact and return it with its new id."""
        response = await execute(self._contacts().insert(contact.to_row(exclude={"id"})))
        created = rows(response, Contact)
        if not created:
            raise RuntimeError(f"Insert returned no rows: {response}")
        logger.info(f"Added contact {created[0].id}")
        return created[0]

    async def find(self, contact_id: int) -> Option[Contact]:
        """The contact with `contact_id`, or Nothing."""
        response = await execute(self._contacts().select("*").eq("id", contact_id).maybe_single())
        # postgrest-py returns no response at all for maybe_single() misses
        if response is None or not response.data:
            return Nothing
        return Some(Contact.model_validate(response.data))

    async def update(self, contact: Contact) -> None:
        """Write every column of `contact` to its row."""
        if contact.id is None:
            raise ValueError("Cannot update a contact without an id")
        await execute(self._contacts().update(contact.to_row(exclude={"id"})).eq("id", contact.id))

    async def delete(self, contact_id: int) -> None:
        await execute(self._contacts().delete().eq("id", contact_id))
        logger.info(f"Deleted contact {contact_id}")

    async def validate_email(self, contact: Contact) -> bool:
        """True when no other contact already uses `contact.email`."""
        response = await execute(self._contacts().select("id").eq("email", contact.email))
        return all(row.get("id") == contact.id for row in response.data or [])
