from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from app.services.media_service import MediaService


@pytest.fixture
def s3_client():
    return Mock()


def test_upload_image_puts_object_in_folder(s3_client):
    service = MediaService(s3_client, bucket="media", folder="DevEvent")

    url = service.upload_image(b"png-bytes", "Talk.PNG", "image/png")

    s3_client.put_object.assert_called_once()
    kwargs = s3_client.put_object.call_args.kwargs
    assert kwargs["Bucket"] == "media"
    assert kwargs["Body"] == b"png-bytes"
    assert kwargs["ContentType"] == "image/png"
    assert kwargs["Key"].startswith("DevEvent/")
    assert kwargs["Key"].endswith(".png")
    assert url.startswith("https://media.s3.")
    assert url.endswith(kwargs["Key"])


def test_upload_image_uses_public_url(s3_client):
    service = MediaService(
        s3_client,
        bucket="media",
        folder="DevEvent",
        public_url="https://cdn.example.com/",
    )

    url = service.upload_image(b"data", "cover.jpg")

    key = s3_client.put_object.call_args.kwargs["Key"]
    assert "ContentType" not in s3_client.put_object.call_args.kwargs
    assert url == f"https://cdn.example.com/{key}"


def test_upload_image_failure(s3_client):
    s3_client.put_object.side_effect = ClientError(
        {"Error": {"Code": "NoSuchBucket", "Message": "missing"}}, "PutObject"
    )
    service = MediaService(s3_client, bucket="media")

    with pytest.raises(Exception, match="Failed to upload image"):
        service.upload_image(b"data", "cover.jpg")
