from imgdrop_core.services.addresser import (
    address,
    extension_for,
    extension_of,
    fingerprint,
    storage_key,
)
from imgdrop_core.services.validator import detect_format, is_valid_image

__all__ = [
    "address",
    "detect_format",
    "extension_for",
    "extension_of",
    "fingerprint",
    "is_valid_image",
    "storage_key",
]
