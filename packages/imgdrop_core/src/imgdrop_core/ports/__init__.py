from imgdrop_core.ports.blob import BlobStore

__all__ = ["BlobStore"]
