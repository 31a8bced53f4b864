from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from deckview.errors import ImageDecodeError

CARD_IMAGE_MAX_DIM = 300
PLACEHOLDER_COLOR = (48, 52, 64, 255)

logger = logging.getLogger(__name__)


def decode_image(payload: bytes, *, max_dim: int | None = CARD_IMAGE_MAX_DIM) -> Image.Image:
    """Decode image bytes into an RGBA image no larger than ``max_dim``."""
    if not payload:
        raise ImageDecodeError("empty image payload")
    try:
        img = Image.open(io.BytesIO(payload))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError(f"cannot decode image: {exc}") from exc
    return _fit(img.convert("RGBA"), max_dim)


def load_placeholder_image(path: Path | None, *, size: int = CARD_IMAGE_MAX_DIM) -> Image.Image:
    """Placeholder art: the configured file, or a flat tile when none is usable."""
    if path is not None and path.exists():
        try:
            return _fit(Image.open(path).convert("RGBA"), size)
        except (UnidentifiedImageError, OSError) as exc:
            logger.warning("Placeholder %s unusable (%s), using a flat tile", path, exc)
    return Image.new("RGBA", (size, size), PLACEHOLDER_COLOR)


def texture_from_image(arcade_module, image: Image.Image, key: str):
    """Wrap a decoded image in an arcade texture. Call on the frame thread."""
    return arcade_module.Texture(image, hash=f"deckview:{key}")


def _fit(img: Image.Image, max_dim: int | None) -> Image.Image:
    if max_dim is None or max(img.size) <= max_dim:
        return img
    w, h = img.size
    scale = max_dim / max(w, h)
    new_w = max(1, int(w * scale))
    new_h = max(1, int(h * scale))
    return img.resize((new_w, new_h), Image.Resampling.LANCZOS)
