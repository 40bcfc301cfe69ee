import asyncio
import time

from resize.transform import CONVERSIONS, resize_jpeg


def _epoch_millis():
    return int(time.time() * 1000)


def output_key(prefix, timestamp_ms, spec) -> str:
    name = f"image-{timestamp_ms}-{spec.label}.jpg"
    if prefix:
        return f"{prefix}/{name}"
    return name


async def convert_image(buffer, conversions=CONVERSIONS):
    """
    Run every conversion of one buffer concurrently and wait for all of them.
    A single failed conversion fails the whole batch.
    """
    loop = asyncio.get_running_loop()
    return await asyncio.gather(
        *(loop.run_in_executor(None, resize_jpeg, buffer, spec) for spec in conversions)
    )


async def convert_images(bucket, prefix, buffers, gateway, conversions=CONVERSIONS, now_millis=_epoch_millis):
    """
    Resize each buffer into every conversion and write the results to the
    bucket. Buffers are handled one after another; the first error stops
    the run. Returns the written keys.
    """
    written = []
    for buffer in buffers:
        images = await convert_image(buffer, conversions)

        # one timestamp per source image keeps its outputs grouped
        timestamp = now_millis()

        for spec, image in zip(conversions, images):
            key = output_key(prefix, timestamp, spec)
            await gateway.put(bucket, key, image)
            print(f"Uploaded to: {key}")
            written.append(key)

    return written
