import logging
import os
import uuid

import boto3
from botocore.exceptions import ClientError

from app.core.config import settings

logger = logging.getLogger(__name__)


def get_s3_client():
    return boto3.client(
        "s3",
        endpoint_url=settings.media_endpoint_url or None,
        region_name=settings.aws_region,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
    )


class MediaService:
    """Stores uploaded event images in S3 and hands back their public URL"""

    def __init__(self, s3_client=None, bucket=None, folder=None, public_url=None):
        self.s3 = s3_client or get_s3_client()
        self.bucket = bucket or settings.media_bucket
        self.folder = folder or settings.media_folder
        self.public_url = public_url or settings.media_public_url

    def upload_image(
        self, data: bytes, filename: str = "", content_type: str = None
    ) -> str:
        """Upload image bytes and return the https URL of the stored object"""
        extension = os.path.splitext(filename or "")[1].lower()
        key = f"{self.folder}/{uuid.uuid4().hex}{extension}"

        put_kwargs = {"Bucket": self.bucket, "Key": key, "Body": data}
        if content_type:
            put_kwargs["ContentType"] = content_type

        try:
            self.s3.put_object(**put_kwargs)
        except ClientError as e:
            raise Exception(f"Failed to upload image: {e}")

        logger.info("Uploaded image to s3://%s/%s", self.bucket, key)
        return self._url_for(key)

    def _url_for(self, key: str) -> str:
        if self.public_url:
            return f"{self.public_url.rstrip('/')}/{key}"
        return f"https://{self.bucket}.s3.{settings.aws_region}.amazonaws.com/{key}"
