import io
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from resize.errors import TransformError


@dataclass(frozen=True)
class ConversionSpec:
    max_width: int
    max_height: int

    def __post_init__(self):
        if self.max_width <= 0 or self.max_height <= 0:
            raise ValueError(f"Conversion box must be positive, got {self.max_width}x{self.max_height}")

    @property
    def label(self):
        return f"{self.max_width}x{self.max_height}"


# changing these requires a redeploy
CONVERSIONS = (
    ConversionSpec(500, 500),
    ConversionSpec(300, 300),
    ConversionSpec(100, 100),
)


def resize_jpeg(buffer: bytes, spec: ConversionSpec) -> bytes:
    """
    Fit the image inside the spec's box, keeping its aspect ratio and never
    enlarging it, and return it encoded as JPEG.
    """
    try:
        with Image.open(io.BytesIO(buffer)) as image:
            if image.mode != 'RGB':
                resized = image.convert('RGB')
            else:
                resized = image.copy()
    except (UnidentifiedImageError, OSError) as e:
        raise TransformError(f"Could not decode image: {e}") from e

    try:
        # thumbnail() resizes in place and never scales up
        resized.thumbnail((spec.max_width, spec.max_height), Image.Resampling.LANCZOS)
        output = io.BytesIO()
        resized.save(output, format='JPEG')
        return output.getvalue()
    except OSError as e:
        raise TransformError(f"Could not resize image to {spec.label}: {e}") from e
    finally:
        resized.close()
