from imgdrop_daemon.adapters.blob_store import LocalBlobStore

__all__ = ["LocalBlobStore"]
