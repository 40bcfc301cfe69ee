import base64
import binascii

from resize.errors import InvalidEncoding
from resize.events import DirectUpload


def decode_transport(payload) -> bytes:
    """
    Turn Base64 transport text into raw image bytes. Uploads and S3 objects
    both arrive Base64-encoded, so this is the only decode step.
    """
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding() from e


async def acquire_buffers(trigger, settings, gateway):
    """Return one raw image buffer per input image, in event order."""
    if isinstance(trigger, DirectUpload):
        return [decode_transport(trigger.body)]

    buffers = []
    for record in trigger.records:
        bucket = record.bucket or settings.bucket_name
        print(f"Processing: s3://{bucket}/{record.key}")
        payload = await gateway.get(bucket, record.key)
        buffers.append(decode_transport(payload))
    return buffers
