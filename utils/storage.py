# utils/storage.py
"""
Key-Value Blob Storage for Dashboard State

Version: 1.0.0
The dashboard persists its ledgers as opaque JSON strings under string keys.
Backends:
- LocalFileStore: one file per key in a data directory (default)
- MemoryStore: process-local dict (tests, ephemeral sessions)
- S3BlobStore: one object per key in an S3 bucket, with retry

Writes are last-write-wins; there is no conflict detection.
"""

import boto3
from botocore.exceptions import ClientError, NoCredentialsError
import logging
import os
import re
import threading
import time
from functools import wraps
from pathlib import Path
from typing import Dict, Optional

from .config import config

logger = logging.getLogger(__name__)

_VALID_KEY = re.compile(r'^[A-Za-z0-9_.-]+$')


class StorageError(Exception):
    """Raised when a backend cannot read or write a blob."""


# ==================== RETRY DECORATOR ====================

def with_retry(max_retries: int = 3, delay: float = 1.0, backoff: float = 2.0):
    """
    Decorator for automatic retry with exponential backoff on S3 client errors

    Args:
        max_retries: Maximum number of attempts
        delay: Initial delay between retries (seconds)
        backoff: Multiplier for delay after each retry
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            last_exception = None
            current_delay = delay

            for attempt in range(max_retries):
                try:
                    return func(*args, **kwargs)
                except ClientError as e:
                    last_exception = e
                    if attempt < max_retries - 1:
                        logger.warning(f"{func.__name__} attempt {attempt + 1} failed, retrying in {current_delay}s...")
                        time.sleep(current_delay)
                        current_delay *= backoff
                    else:
                        logger.error(f"{func.__name__} failed after {max_retries} attempts: {e}")

            raise last_exception
        return wrapper
    return decorator


def _check_key(key: str) -> str:
    if not key or not _VALID_KEY.match(key):
        raise ValueError(f"Invalid storage key: {key!r}")
    return key


# ==================== BACKENDS ====================

class KeyValueStore:
    """Opaque string blob store keyed by a string."""

    name = "base"

    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under key, or None when absent."""
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous blob."""
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """In-process store; contents live as long as the object."""

    name = "memory"

    def __init__(self, initial: Dict[str, str] = None):
        self._blobs: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(_check_key(key))

    def set(self, key: str, value: str) -> None:
        self._blobs[_check_key(key)] = value


class LocalFileStore(KeyValueStore):
    """
    One ``<key>.json`` file per key under a data directory.

    Writes go to a temporary file first and are moved into place, so a reader
    never sees a half-written blob.
    """

    name = "local"

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{_check_key(key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not read '{key}' from {path}") from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(value, encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as e:
            raise StorageError(f"Could not write '{key}' to {path}") from e


class S3BlobStore(KeyValueStore):
    """
    One object per key under ``<app_prefix>/state/`` in an S3 bucket.

    Usage:
        store = S3BlobStore(bucket_name="sales-bi", app_prefix="prod")
        store.set("sales_ledger_v1", payload)
    """

    name = "s3"

    def __init__(
        self,
        bucket_name: str,
        app_prefix: str = "sales-bi",
        region: str = "sa-east-1",
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        s3_client=None
    ):
        self.bucket_name = bucket_name
        self.app_prefix = app_prefix

        if s3_client is not None:
            self.s3_client = s3_client
            return

        try:
            self.s3_client = boto3.client(
                's3',
                region_name=region,
                aws_access_key_id=access_key_id,
                aws_secret_access_key=secret_access_key
            )
            logger.info(f"✅ S3 client initialized: {self.bucket_name}")
        except NoCredentialsError as e:
            logger.error("❌ AWS credentials not found")
            raise StorageError("AWS credentials not configured") from e

    def _object_key(self, key: str) -> str:
        return f"{self.app_prefix}/state/{_check_key(key)}.json"

    @with_retry(max_retries=3)
    def _get_object(self, key: str) -> Optional[str]:
        try:
            response = self.s3_client.get_object(
                Bucket=self.bucket_name,
                Key=self._object_key(key)
            )
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') in ('NoSuchKey', '404'):
                return None
            raise
        return response['Body'].read().decode('utf-8')

    @with_retry(max_retries=3)
    def _put_object(self, key: str, value: str) -> None:
        body = value.encode('utf-8')
        self.s3_client.put_object(
            Bucket=self.bucket_name,
            Key=self._object_key(key),
            Body=body,
            ContentType='application/json',
            ServerSideEncryption='AES256'
        )
        logger.info(f"✅ Saved: {self._object_key(key)} ({len(body)} bytes)")

    def get(self, key: str) -> Optional[str]:
        try:
            return self._get_object(key)
        except ClientError as e:
            raise StorageError(f"Could not read '{key}' from S3") from e

    def set(self, key: str, value: str) -> None:
        try:
            self._put_object(key, value)
        except ClientError as e:
            raise StorageError(f"Could not write '{key}' to S3") from e


# ==================== SINGLETON ACCESS ====================

_store = None
_store_lock = threading.Lock()


def create_store(backend: str = None) -> KeyValueStore:
    """Build the backend named in configuration (or the one given)."""
    storage_config = config.get_storage_config()
    backend = (backend or storage_config.backend).lower()

    if backend == "memory":
        return MemoryStore()

    if backend == "s3":
        aws_config = config.get_aws_config()
        return S3BlobStore(
            bucket_name=aws_config['bucket_name'],
            app_prefix=aws_config['app_prefix'],
            region=aws_config['region'],
            access_key_id=aws_config['access_key_id'],
            secret_access_key=aws_config['secret_access_key']
        )

    if backend != "local":
        logger.warning(f"Unknown storage backend '{backend}', using local files")
    return LocalFileStore(storage_config.data_dir)


def get_store() -> KeyValueStore:
    """Get the shared store instance (thread-safe)"""
    global _store

    if _store is None:
        with _store_lock:
            if _store is None:
                _store = create_store()
                logger.info(f"🗄️ Storage backend: {_store.name}")

    return _store


def reset_store():
    """Reset the shared store (for reconfiguration)"""
    global _store

    with _store_lock:
        _store = None

    logger.info("🔄 Store reset")
