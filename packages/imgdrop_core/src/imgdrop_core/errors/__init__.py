class ImgDropError(Exception):
    """Base class for domain exceptions."""


class BadRequestError(ImgDropError):
    """Client-caused failure, reported with a 4xx status."""

    default_message = "Bad request"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NoFileError(BadRequestError):
    default_message = "No file uploaded"


class InvalidContentError(BadRequestError):
    default_message = "Invalid file type. Only jpg, png, gif, webp allowed."


class FileTooLargeError(BadRequestError):
    def __init__(self, max_bytes: int) -> None:
        self.max_bytes = max_bytes
        super().__init__(f"File too large. Maximum size is {_format_size(max_bytes)}.")


class StorageError(ImgDropError):
    """Durable storage failed while persisting an upload."""

    def __init__(self, key: str, message: str = "Failed to store file") -> None:
        self.key = key
        self.message = message
        super().__init__(message)


class BlobNotFoundError(ImgDropError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Blob not found: {key}")


class InvalidStorageKeyError(ImgDropError, ValueError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Invalid storage key: {key!r}")


def _format_size(num_bytes: int) -> str:
    mib = 1024 * 1024
    if num_bytes >= mib and num_bytes % mib == 0:
        return f"{num_bytes // mib}MB"
    if num_bytes >= 1024 and num_bytes % 1024 == 0:
        return f"{num_bytes // 1024}KB"
    return f"{num_bytes} bytes"
