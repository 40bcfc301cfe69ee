import asyncio
import traceback

from resize.buffers import acquire_buffers
from resize.config import load_settings
from resize.events import DirectUpload, parse_trigger, validate_trigger
from resize.orchestrator import convert_images
from resize.response import error_result, result
from resize.storage import get_gateway
from resize.transform import CONVERSIONS


def resize_handler(event, context):
    """
    Resize Lambda - Resize JPG images from API Gateway or S3 into every
    configured conversion and write them to the bucket
    """
    print("Resize Lambda triggered")

    try:
        settings = load_settings()
        trigger = validate_trigger(parse_trigger(event), settings)

        if isinstance(trigger, DirectUpload):
            print("Event received as a direct upload")
        else:
            print(f"Event received with {len(trigger.records)} S3 records")

        written = asyncio.run(_process(trigger, settings, get_gateway()))

    except Exception as e:
        print(f"Failed to process event: {str(e)}")
        print(f"Exception type: {type(e).__name__}")
        print(f"Traceback: {traceback.format_exc()}")
        return error_result(e)

    print(f"Processing complete: {len(written)} images written")
    return result()


async def _process(trigger, settings, gateway):
    buffers = await acquire_buffers(trigger, settings, gateway)
    return await convert_images(
        settings.bucket_name,
        settings.resized_images_path,
        buffers,
        gateway,
        CONVERSIONS,
    )
