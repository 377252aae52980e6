"""
supakit - Storage Wrappers.

Bucket file operations. StorageException from storage3 (missing bucket,
policy denial, ...) propagates unchanged.
"""

import logging
from typing import Any

from supakit.aio import call

logger = logging.getLogger(__name__)


def bucket(client: Any, bucket_id: str) -> Any:
    """The storage3 bucket proxy for `bucket_id`."""
    return client.storage.from_(bucket_id)


async def upload(
    client: Any,
    bucket_id: str,
    path: str,
    data: bytes,
    file_options: dict[str, Any] | None = None,
) -> Any:
    """
    Upload `data` to `path` in the bucket.

    `file_options` takes storage3's keys, e.g. {"content-type": "text/plain", "upsert": "true"}.
    """
    logger.debug(f"Uploading {len(data)} bytes to {bucket_id}/{path}")
    return await call(bucket(client, bucket_id).upload, path, data, file_options)


async def download(client: Any, bucket_id: str, path: str) -> bytes:
    logger.debug(f"Downloading {bucket_id}/{path}")
    return await call(bucket(client, bucket_id).download, path)


async def delete(client: Any, bucket_id: str, paths: list[str]) -> list[dict[str, Any]]:
    """Remove files. Returns storage3's records of the removed objects."""
    logger.debug(f"Removing {len(paths)} file(s) from {bucket_id}")
    return await call(bucket(client, bucket_id).remove, list(paths))


async def list_files(client: Any, bucket_id: str, path: str = "") -> list[dict[str, Any]]:
    """List the files under `path` ("" for the bucket root)."""
    return await call(bucket(client, bucket_id).list, path or None)


async def public_url(client: Any, bucket_id: str, path: str) -> str:
    """Public URL of a file in a public bucket."""
    return await call(bucket(client, bucket_id).get_public_url, path)
