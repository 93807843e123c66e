from imgdrop_daemon.config.settings import Settings

__all__ = ["Settings"]
