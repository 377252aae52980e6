#!/usr/bin/env python
"""
Tour of the supakit wrappers against a real Supabase project.

Usage:
    python scripts/run_examples.py
    python scripts/run_examples.py --verbose

Needs SUPABASE_URL and SUPABASE_KEY (environment or .env). Each example
reports its own failure and the tour carries on, so a project without a
movies table or a test-bucket still runs the rest.
"""

import argparse
import asyncio
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from supakit import auth, functions, realtime, storage  # noqa: E402
from supakit.client import create_async, execute, from_, initialize, rows, rpc  # noqa: E402
from supakit.models import TableModel  # noqa: E402
from supakit.observability import setup_logging  # noqa: E402
from supakit.option import Some, access_token_of, default_with, email_of, from_nullable  # noqa: E402
from supakit.options import OptionsBuilder  # noqa: E402
from supakit.workflow import auth_workflow  # noqa: E402

load_dotenv()

logger = logging.getLogger("examples")


class Movie(TableModel):
    __table_name__ = "movies"

    id: int | None = None
    name: str
    created_at: datetime | None = None


def configure_options():
    return (
        OptionsBuilder()
        .schema("public")
        .auto_refresh_token(True)
        .auto_connect_realtime(False)
        .build()
    )


async def example_create_client():
    print("Example 1: Creating Supabase client")

    url = from_nullable(os.getenv("SUPABASE_URL"))
    key = from_nullable(os.getenv("SUPABASE_KEY"))
    if not (isinstance(url, Some) and isinstance(key, Some)):
        print("✗ SUPABASE_URL and SUPABASE_KEY environment variables must be set")
        return None

    options = configure_options()
    client = await initialize(await create_async(url.value, key.value, options), options)
    print("✓ Client initialized successfully")
    return client


async def example_authentication(client):
    print("\nExample 2: Authentication")

    email = "test@example.com"
    print(f"Signing up user: {email}")
    await auth.sign_up(client, email, "securepassword123")
    print("✓ User signed up successfully")

    match await auth.current_user(client):
        case Some(user):
            print(f"✓ Current user ID: {user.id}")
            match email_of(user):
                case Some(address):
                    print(f"  Email: {address}")
                case _:
                    print("  Email: (not set)")
        case _:
            print("✗ No current user")

    print("Signing out...")
    await auth.sign_out(client)
    print("✓ Signed out successfully")


async def example_database(client):
    print("\nExample 3: Database operations")

    print("Fetching movies...")
    movies = rows(await execute(from_(client, Movie).select("*")), Movie)
    print(f"✓ Found {len(movies)} movies")
    for movie in movies:
        print(f"  - {movie.name} (ID: {movie.id})")


async def example_realtime(client):
    print("\nExample 4: Realtime")

    print("Connecting to realtime...")
    await realtime.connect(client)
    print("✓ Connected to realtime")

    channel = realtime.channel(client, "public:movies")
    print(f"✓ Channel created: {channel.topic}")

    print("Disconnecting from realtime...")
    await realtime.disconnect(client)
    print("✓ Disconnected from realtime")


async def example_storage(client):
    print("\nExample 5: Storage")

    bucket_id = "test-bucket"
    path = "test-file.txt"

    print(f"Uploading file to bucket '{bucket_id}'...")
    await storage.upload(client, bucket_id, path, b"Hello from supakit!", {"upsert": "true"})
    print(f"✓ File uploaded: {path}")

    print(f"✓ Public URL: {await storage.public_url(client, bucket_id, path)}")

    print("Listing files in bucket...")
    files = await storage.list_files(client, bucket_id)
    print(f"✓ Found {len(files)} files")


async def example_rpc(client):
    print("\nExample 6: Remote Procedure Call")

    print("Calling RPC function 'hello_world'...")
    response = await rpc(client, "hello_world", {"name": "Python Developer"})
    print(f"✓ RPC call completed: {response.data}")


async def example_functions(client):
    print("\nExample 7: Edge Functions")

    body = await functions.invoke_with(client, "hello", {"name": "Python Developer"})
    print(f"✓ Function returned {len(body)} bytes")


@auth_workflow
async def check_session(client):
    print("Starting auth workflow...")
    match await auth.current_session(client):
        case Some(session):
            print("✓ Session found")
            match access_token_of(session):
                case Some(token):
                    print(f"  Access token length: {len(token)}")
                    return "Authenticated"
            raise PermissionError("No access token")
        case _:
            print("  No active session")
            raise PermissionError("Not authenticated")


async def example_workflow(client):
    print("\nExample 8: Workflows")
    try:
        print(f"✓ {await check_session(client)}")
    except PermissionError as e:
        print(f"✗ {e}")


async def example_default_session(client):
    print("\nExample 9: Defaults for absent values")

    session = default_with(await auth.current_session(client), lambda: print("  No active session"))
    print(f"✓ Session: {'present' if session else 'absent'}")


EXAMPLES = [
    example_authentication,
    example_database,
    example_realtime,
    example_storage,
    example_rpc,
    example_functions,
    example_workflow,
    example_default_session,
]


async def main(verbose: bool = False):
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    print("=" * 42)
    print("supakit Examples")
    print("=" * 42)

    client = await example_create_client()
    if client is None:
        print("\nSkipping examples due to missing configuration")
        return

    for example in EXAMPLES:
        try:
            await example(client)
        except Exception as e:
            logger.debug("Example failed", exc_info=True)
            print(f"✗ {example.__name__} failed: {e}")

    print("\n" + "=" * 42)
    print("Examples completed!")
    print("=" * 42)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the supakit examples")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    asyncio.run(main(verbose=args.verbose))
