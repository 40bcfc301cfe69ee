import base64
import io

import pytest
from PIL import Image

from resize.errors import StorageError


class FakeGateway:
    """In-memory stand-in for StorageGateway."""

    def __init__(self, objects=None, fail_get=None, fail_put=None):
        self.objects = dict(objects or {})
        self.fail_get = fail_get
        self.fail_put = fail_put
        self.gets = []
        self.puts = []

    async def get(self, bucket, key):
        self.gets.append((bucket, key))
        if self.fail_get is not None:
            raise self.fail_get
        if (bucket, key) not in self.objects:
            raise StorageError(f"s3://{bucket}/{key} not found", 404)
        return base64.b64encode(self.objects[(bucket, key)]).decode('ascii')

    async def put(self, bucket, key, body, content_type='image/jpeg'):
        if self.fail_put is not None:
            raise self.fail_put
        self.puts.append((bucket, key, body))


def jpeg_bytes(width, height, mode='RGB'):
    buffer = io.BytesIO()
    Image.new(mode, (width, height), 'white').save(buffer, format='JPEG')
    return buffer.getvalue()


def image_size(data):
    with Image.open(io.BytesIO(data)) as image:
        return image.format, image.size


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def resize_env(monkeypatch):
    monkeypatch.setenv('BUCKET_NAME', 'resized-bucket')
    monkeypatch.setenv('RESIZED_IMAGES_PATH', 'resized')
    monkeypatch.delenv('ACCEPT_STORAGE_EVENTS', raising=False)


def upload_event(data, content_type='image/jpg', encoded=True):
    return {
        'headers': {'content-type': content_type},
        'isBase64Encoded': encoded,
        'body': base64.b64encode(data).decode('ascii'),
    }


def s3_event(*keys, bucket='uploads-bucket'):
    return {
        'Records': [
            {'s3': {'bucket': {'name': bucket}, 'object': {'key': key}}}
            for key in keys
        ]
    }
