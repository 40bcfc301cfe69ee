class ResizeError(Exception):
    """Base class for every failure the resize Lambda reports."""

    status_code = 400


class ValidationError(ResizeError):
    pass


class InvalidContentType(ValidationError):
    def __init__(self, message="Input must be of JPG type!"):
        super().__init__(message)


class NotBase64Encoded(ValidationError):
    def __init__(self, message="Input must be binary (Base64-encoded)!"):
        super().__init__(message)


class InvalidEncoding(ValidationError):
    def __init__(self, message="Input is not valid Base64!"):
        super().__init__(message)


class UnsupportedTrigger(ValidationError):
    def __init__(self, message="Storage events are not accepted by this deployment!"):
        super().__init__(message)


class ConfigurationError(ResizeError):
    pass


class StorageError(ResizeError):
    """
    S3 read or write failure. Keeps the upstream HTTP status when S3 sent one.
    """

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class TransformError(ResizeError):
    pass
