import logging
import os


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ToolkitConfig:
    """
    Central configuration for assembling the toolkit.
    Controls which storage backend serves uploaded tables.
    """

    def __init__(
        self,
        storage_backend: str = "memory",   # "memory" or "filesystem"
        storage_root: str = None,
        log_level: str = "INFO",
    ):
        self.storage_backend = storage_backend
        self.storage_root = storage_root
        self.log_level = log_level

        self._validate()

    @classmethod
    def from_env(cls, environ=None) -> "ToolkitConfig":
        environ = os.environ if environ is None else environ

        return cls(
            storage_backend=environ.get("TABLEMIND_STORAGE_BACKEND", "memory"),
            storage_root=environ.get("TABLEMIND_STORAGE_ROOT") or None,
            log_level=environ.get("TABLEMIND_LOG_LEVEL", "INFO"),
        )

    def _validate(self):
        if self.storage_backend not in {"memory", "filesystem"}:
            raise ValueError(f"Unsupported storage_backend: {self.storage_backend}")

        if self.storage_backend == "filesystem" and not self.storage_root:
            raise ValueError("Filesystem storage requires a storage_root")

        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"Unsupported log_level: {self.log_level}")

    def __repr__(self) -> str:
        return (
            f"ToolkitConfig(storage_backend={self.storage_backend!r}, "
            f"storage_root={self.storage_root!r}, log_level={self.log_level!r})"
        )


def configure_logging(level: str = "INFO") -> None:
    """Process-level logging setup for applications embedding the toolkit."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
