from __future__ import annotations

from hashlib import sha256

from imgdrop_core.models import ImageFormat

CANONICAL_EXTENSIONS: dict[ImageFormat, str] = {
    ImageFormat.JPEG: ".jpg",
    ImageFormat.PNG: ".png",
    ImageFormat.GIF: ".gif",
    ImageFormat.WEBP: ".webp",
}


def fingerprint(content: bytes) -> str:
    return sha256(content).hexdigest()


def extension_of(filename: str) -> str:
    """Return the extension of the base name, leading dot included.

    The text is kept verbatim (no case folding). Names without a dot, and
    dotfiles such as ``.bashrc``, have no extension.
    """
    base = filename.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    if dot <= 0 or base.count(".") == len(base):
        return ""
    return base[dot:]


def extension_for(image_format: ImageFormat) -> str:
    return CANONICAL_EXTENSIONS[image_format]


def storage_key(digest: str, extension: str) -> str:
    return f"{digest}{extension}"


def address(content: bytes, original_name: str) -> str:
    return storage_key(fingerprint(content), extension_of(original_name))
