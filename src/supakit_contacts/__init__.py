"""
supakit Contacts - example contact manager built on supakit.

The service holds the client it is given; there is no module-level client.
"""

from supakit_contacts.models import Contact
from supakit_contacts.service import PAGE_SIZE, ContactService

__all__ = [
    "PAGE_SIZE",
    "Contact",
    "ContactService",
]
