from typing import Optional

import pydantic
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resize.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Deployment settings, read from the Lambda environment.

    BUCKET_NAME            destination bucket (and source bucket for S3 records without one)
    RESIZED_IMAGES_PATH    key prefix for resized images
    ACCEPT_STORAGE_EVENTS  false for upload-only deployments
    """

    model_config = SettingsConfigDict(extra="ignore")

    bucket_name: str
    resized_images_path: Optional[str] = None
    accept_storage_events: bool = True

    @field_validator("bucket_name")
    @classmethod
    def _bucket_not_blank(cls, value):
        if not value.strip():
            raise ValueError("Missing bucket name!")
        return value.strip()

    @field_validator("resized_images_path")
    @classmethod
    def _normalise_path(cls, value):
        if value is None:
            return None
        return value.strip().strip("/") or None

    @model_validator(mode="after")
    def _path_required_for_storage_events(self):
        # storage-event deployments keep outputs under their own prefix
        if self.accept_storage_events and not self.resized_images_path:
            raise ValueError("Missing path to resized images!")
        return self


def load_settings() -> Settings:
    try:
        return Settings()
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
