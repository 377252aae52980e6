"""
supakit Contacts - CLI Entry Point.

Usage:
    supakit-contacts list --page 2
    supakit-contacts search ada
    supakit-contacts add Ada Lovelace 555-0100 ada@example.com
    supakit-contacts update 7 --phone 555-0199
    supakit-contacts delete 7

Connects with SUPABASE_URL and SUPABASE_KEY, the project's anon key, without
signing in. The contacts migration in supabase/migrations/ grants that role
access to the table.
"""

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from supakit.aio import run_sync
from supakit.client import create_from_settings
from supakit.config import get_settings
from supakit.observability import setup_logging

from supakit_contacts.models import Contact
from supakit_contacts.service import ContactService

app = typer.Typer(
    name="supakit-contacts",
    help="Manage the contacts table of a Supabase project.",
    add_completion=False,
)
console = Console()


def _service() -> ContactService:
    settings = get_settings()
    setup_logging(settings.log_level)
    try:
        client = run_sync(create_from_settings(settings))
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    return ContactService(client)


def _print_contacts(contacts: list[Contact], title: str) -> None:
    if not contacts:
        console.print("[dim]No contacts.[/dim]")
        return

    table = Table(title=title)
    for column in ("ID", "First", "Last", "Phone", "Email"):
        table.add_column(column)
    for c in contacts:
        table.add_row(str(c.id), c.first, c.last, c.phone, c.email)
    console.print(table)


@app.command("list")
def list_contacts(
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number (5 contacts per page)"),
) -> None:
    """List contacts one page at a time."""
    service = _service()
    contacts = run_sync(service.page(page))
    total = run_sync(service.count())
    _print_contacts(contacts, f"Contacts (page {page}, {total} total)")


@app.command()
def search(term: str = typer.Argument(..., help="Text to find in first or last names")) -> None:
    """Search contacts by name."""
    _print_contacts(run_sync(_service().search(term)), f"Contacts matching '{term}'")


@app.command()
def add(
    first: str = typer.Argument(...),
    last: str = typer.Argument(...),
    phone: str = typer.Argument(...),
    email: str = typer.Argument(...),
) -> None:
    """Add a contact. Emails must be unique."""
    try:
        contact = Contact(first=first, last=last, phone=phone, email=email)
    except ValidationError as e:
        console.print(f"[red]❌ Invalid contact:[/red]\n{e}")
        raise typer.Exit(1)

    service = _service()
    if not run_sync(service.validate_email(contact)):
        console.print(f"[red]❌ A contact with email {email} already exists[/red]")
        raise typer.Exit(1)

    created = run_sync(service.add(contact))
    console.print(f"✅ Added {created.full_name} (id {created.id})")


@app.command()
def update(
    contact_id: int = typer.Argument(..., help="Contact id"),
    first: str | None = typer.Option(None, "--first"),
    last: str | None = typer.Option(None, "--last"),
    phone: str | None = typer.Option(None, "--phone"),
    email: str | None = typer.Option(None, "--email"),
) -> None:
    """Edit a contact. Only the given fields change; emails must stay unique."""
    changes = {
        name: value
        for name, value in (("first", first), ("last", last), ("phone", phone), ("email", email))
        if value is not None
    }
    if not changes:
        console.print("[red]❌ Nothing to update; pass --first, --last, --phone or --email[/red]")
        raise typer.Exit(1)

    service = _service()
    found = run_sync(service.find(contact_id))
    if not found:
        console.print(f"[red]❌ No contact with id {contact_id}[/red]")
        raise typer.Exit(1)

    try:
        contact = Contact.model_validate({**found.value.model_dump(), **changes})
    except ValidationError as e:
        console.print(f"[red]❌ Invalid contact:[/red]\n{e}")
        raise typer.Exit(1)

    if not run_sync(service.validate_email(contact)):
        console.print(f"[red]❌ A contact with email {contact.email} already exists[/red]")
        raise typer.Exit(1)

    run_sync(service.update(contact))
    console.print(f"✅ Updated {contact.full_name} (id {contact.id})")


@app.command()
def delete(contact_id: int = typer.Argument(..., help="Contact id")) -> None:
    """Delete a contact."""
    service = _service()
    found = run_sync(service.find(contact_id))
    if not found:
        console.print(f"[red]❌ No contact with id {contact_id}[/red]")
        raise typer.Exit(1)

    run_sync(service.delete(contact_id))
    console.print(f"✅ Deleted {found.value.full_name}")


if __name__ == "__main__":
    app()
