"""
supakit - CLI Entry Point.

Usage:
    supakit health           Check configuration
    supakit db contacts      Count rows in one or more tables
    supakit version          Show version
"""

import typer
from rich.console import Console

app = typer.Typer(
    name="supakit",
    help="supakit - check a Supabase project configuration and connection.",
    add_completion=False,
)
console = Console()


@app.command()
def health() -> None:
    """Check configuration."""
    from supakit.config import get_settings

    console.print("\n[bold]supakit Health Check[/bold]\n")

    try:
        settings = get_settings()
    except Exception as e:
        console.print(f"\n[red]❌ Configuration error: {e}[/red]")
        console.print("[dim]Make sure you have a .env file with required variables.[/dim]")
        raise typer.Exit(1)

    console.print("✅ Configuration loaded")
    console.print(f"   Environment: {settings.supakit_env}")
    console.print(f"   Log level: {settings.log_level}")
    console.print(f"   Schema: {settings.supabase_schema}")

    if settings.supabase_url.startswith(("https://", "http://localhost", "http://127.0.0.1")):
        console.print("✅ Supabase URL configured")
    else:
        console.print("❌ Supabase URL missing or invalid")

    if settings.supabase_key:
        console.print("✅ Supabase key configured")
    else:
        console.print("❌ Supabase key missing")

    missing = settings.validate_required()
    if missing:
        console.print(f"\n[red]Missing: {', '.join(missing)}[/red]")
        raise typer.Exit(1)

    console.print("\n[green]All checks passed![/green]")


@app.command()
def version() -> None:
    """Show version information."""
    from supakit import __version__

    console.print(f"supakit version {__version__}")


@app.command()
def db(
    tables: list[str] = typer.Argument(..., help="Tables to count"),
) -> None:
    """Check the database connection by counting rows in each table."""
    from supakit.aio import run_sync
    from supakit.client import create_from_settings, execute, from_
    from supakit.config import get_settings
    from supakit.observability import setup_logging

    setup_logging(get_settings().log_level)

    console.print("\n[bold]Database Connection Check[/bold]\n")

    try:
        client = run_sync(create_from_settings())
        console.print("✅ Connected to Supabase")
    except Exception as e:
        console.print(f"\n[red]❌ Database connection failed: {e}[/red]")
        raise typer.Exit(1)

    console.print("\n[bold]Table Status:[/bold]")
    failed = False
    for table in tables:
        try:
            result = run_sync(execute(from_(client, table).select("*", count="exact").limit(0)))
            count = result.count if result.count is not None else "?"
            console.print(f"  ✅ {table}: {count} rows")
        except Exception as e:
            failed = True
            console.print(f"  ❌ {table}: {e}")

    if failed:
        raise typer.Exit(1)

    console.print("\n[green]Database check complete![/green]")


if __name__ == "__main__":
    app()
