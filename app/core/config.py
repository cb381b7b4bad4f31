"""
Application settings read from environment variables.

``settings`` is built once at import time, so the environment has to be
populated before ``app.core.config`` is first imported.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "DevEvent API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Connection string for DynamoDB. There is no default: the
    # persistence gateway refuses to load without it.
    dynamodb_endpoint_url: str = os.getenv("DYNAMODB_ENDPOINT_URL", "")
    dynamodb_table_name: str = os.getenv("DYNAMODB_TABLE_NAME", "DevEvent")

    aws_region: str = os.getenv("AWS_DEFAULT_REGION", "us-east-1")
    aws_access_key_id: str = os.getenv("AWS_ACCESS_KEY_ID", "fake")
    aws_secret_access_key: str = os.getenv("AWS_SECRET_ACCESS_KEY", "fake")

    # Image uploads go to this bucket, under ``media_folder``.
    media_bucket: str = os.getenv("MEDIA_BUCKET", "devevent-media")
    media_folder: str = os.getenv("MEDIA_FOLDER", "DevEvent")
    media_endpoint_url: str = os.getenv("MEDIA_ENDPOINT_URL", "")
    # Base URL returned to clients; defaults to the bucket's virtual host.
    media_public_url: str = os.getenv("MEDIA_PUBLIC_URL", "")


settings = Settings()
