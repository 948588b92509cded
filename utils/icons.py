import base64
import io
import logging

from PIL import Image

logger = logging.getLogger(__name__)


def decode_icon(data: str | None) -> Image.Image | None:
    """Decode a base64 icon payload into an RGBA image.

    Blank input returns None quietly; a payload that cannot be decoded is
    logged and also returns None, so callers fall back to the default icon.
    """
    if data is None or not data.strip():
        return None
    try:
        raw = base64.b64decode(data, validate=False)
        with Image.open(io.BytesIO(raw)) as img:
            return img.convert("RGBA")
    except Exception as e:
        logger.error(f"Cannot decode icon bitmap: {e}")
        return None
