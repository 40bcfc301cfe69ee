import json
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union
from urllib.parse import unquote_plus

from resize.errors import InvalidContentType, NotBase64Encoded, UnsupportedTrigger

JPEG_MEDIA_TYPE = 'image/jpg'
JPEG_SUFFIX = '.jpg'


@dataclass(frozen=True)
class ObjectRecord:
    key: str
    bucket: Optional[str] = None


@dataclass(frozen=True)
class DirectUpload:
    """Image sent straight through API Gateway as the request body."""

    headers: dict
    is_base64_encoded: bool
    body: str

    @property
    def content_type(self):
        # REST APIs keep header case, HTTP APIs lowercase it
        for name, value in self.headers.items():
            if name.lower() == 'content-type':
                return value
        return None


@dataclass(frozen=True)
class StorageNotification:
    """S3 notification for images that are already in a bucket."""

    records: Tuple[ObjectRecord, ...]


Trigger = Union[DirectUpload, StorageNotification]


def parse_trigger(event) -> Trigger:
    if event.get('headers') is not None:
        return DirectUpload(
            headers=dict(event['headers']),
            is_base64_encoded=bool(event.get('isBase64Encoded')),
            body=event.get('body') or '',
        )
    return StorageNotification(records=tuple(_object_records(event)))


def _object_records(event):
    for record in event.get('Records', []):
        # S3 events published through SNS carry the S3 event as a JSON message
        if 'Sns' in record:
            sns_message = json.loads(record['Sns']['Message'])
            yield from _object_records(sns_message)
            continue

        s3_record = record.get('s3') or {}
        bucket = (s3_record.get('bucket') or {}).get('name')
        key = unquote_plus((s3_record.get('object') or {}).get('key') or '')
        yield ObjectRecord(key=key, bucket=bucket or None)


def validate_trigger(trigger: Trigger, settings) -> Trigger:
    """
    Check the trigger can be processed and return it with empty S3 keys
    dropped. Raises a ValidationError subclass otherwise; nothing is fetched
    or written here.
    """
    if isinstance(trigger, DirectUpload):
        if trigger.content_type != JPEG_MEDIA_TYPE:
            raise InvalidContentType()
        if not trigger.is_base64_encoded:
            raise NotBase64Encoded()
        return trigger

    if not settings.accept_storage_events:
        raise UnsupportedTrigger()

    records = tuple(record for record in trigger.records if record.key)
    if not records:
        raise InvalidContentType("No JPG objects in storage event!")
    if not all(record.key.rsplit('/', 1)[-1].endswith(JPEG_SUFFIX) for record in records):
        raise InvalidContentType()

    return replace(trigger, records=records)
