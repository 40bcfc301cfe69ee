import asyncio
import base64
import functools

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from resize.errors import StorageError


class StorageGateway:
    """
    Reads and writes S3 objects for the resize Lambda.

    The boto3 client is blocking, so each call runs on the loop's default
    executor and callers simply await it.
    """

    def __init__(self, client):
        self._client = client

    async def get(self, bucket, key) -> str:
        """Fetch an object and return its content as Base64 text."""
        data = await self._run(self._download, bucket, key)
        return base64.b64encode(data).decode('ascii')

    async def put(self, bucket, key, body, content_type='image/jpeg'):
        await self._run(self._upload, bucket, key, body, content_type)

    def _download(self, bucket, key):
        response = self._client.get_object(Bucket=bucket, Key=key)
        return response['Body'].read()

    def _upload(self, bucket, key, body, content_type):
        self._client.put_object(Bucket=bucket, Key=key, Body=body, ContentType=content_type)

    async def _run(self, func, bucket, key, *args):
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, func, bucket, key, *args)
        except ClientError as e:
            status = e.response.get('ResponseMetadata', {}).get('HTTPStatusCode')
            raise StorageError(f"S3 request failed for s3://{bucket}/{key}: {e}", status) from e
        except BotoCoreError as e:
            raise StorageError(f"S3 request failed for s3://{bucket}/{key}: {e}") from e


@functools.lru_cache(maxsize=None)
def get_gateway() -> StorageGateway:
    """One S3 client per Lambda container, reused across invocations."""
    return StorageGateway(boto3.client('s3'))
