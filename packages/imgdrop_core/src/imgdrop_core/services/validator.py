from __future__ import annotations

from imgdrop_core.models import ImageFormat

SIGNATURES: dict[ImageFormat, tuple[str, ...]] = {
    ImageFormat.JPEG: ("ffd8ff",),
    ImageFormat.PNG: ("89504e47",),
    ImageFormat.GIF: ("47494638",),
    # RIFF container marker; any RIFF file matches unless strict_webp is set.
    ImageFormat.WEBP: ("52494646",),
}

_WEBP_TAG = b"WEBP"


def detect_format(content: bytes, *, strict_webp: bool = False) -> ImageFormat | None:
    head = content[:4].hex()
    if not head:
        return None

    for image_format, prefixes in SIGNATURES.items():
        if not any(head.startswith(prefix) for prefix in prefixes):
            continue
        if image_format is ImageFormat.WEBP and strict_webp and content[8:12] != _WEBP_TAG:
            return None
        return image_format
    return None


def is_valid_image(content: bytes, *, strict_webp: bool = False) -> bool:
    return detect_format(content, strict_webp=strict_webp) is not None
