import logging
import threading

import boto3

from app.core.config import settings

logger = logging.getLogger(__name__)

if not settings.dynamodb_endpoint_url:
    raise RuntimeError(
        "Please define the DYNAMODB_ENDPOINT_URL environment variable"
    )

_connection = None
_connection_lock = threading.Lock()


def _connect():
    logger.info("Connecting to DynamoDB at %s", settings.dynamodb_endpoint_url)
    return boto3.resource(
        "dynamodb",
        endpoint_url=settings.dynamodb_endpoint_url,
        region_name=settings.aws_region,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
    )


def get_db_connection():
    """Return the process-wide DynamoDB resource, creating it on first use.

    Callers that arrive while the first connection is being created wait on
    the lock and then reuse that same resource.
    """
    global _connection
    if _connection is not None:
        return _connection

    with _connection_lock:
        if _connection is None:
            _connection = _connect()
    return _connection


def reset_db_connection():
    """Drop the cached resource so the next call reconnects."""
    global _connection
    with _connection_lock:
        _connection = None
