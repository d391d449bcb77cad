from typing import Optional

from .builtin.analytics import register_builtin_analytics
from .config import ToolkitConfig
from .connectors.manager import ConnectorManager
from .data.loader import TabularDataLoader
from .storage import FilesystemStorage, InMemoryStorage, StorageBackend
from .tools.executor import ToolExecutor
from .tools.registry import ToolRegistry


class TableMindApp:
    """
    Top-level facade for assembling the toolkit.

    Builds, in dependency order, the storage backend, the data loader,
    the connectors, the tool registry and the executor. Nothing is kept
    in module-level state: every call returns an independent executor.
    """

    @staticmethod
    def create(
        *,
        config: Optional[ToolkitConfig] = None,
        storage: Optional[StorageBackend] = None,
    ) -> ToolExecutor:
        """
        Construct a fully wired ToolExecutor.

        Parameters
        ----------
        config : ToolkitConfig, optional
            Chooses the storage backend when ``storage`` is not given.
            Defaults to in-memory storage.

        storage : StorageBackend, optional
            Consumer-provided backend. Takes precedence over ``config``.
        """

        config = config or ToolkitConfig()

        if storage is None:
            storage = TableMindApp.create_storage(config)

        loader = TabularDataLoader(storage)
        connectors = ConnectorManager()
        registry = ToolRegistry()

        register_builtin_analytics(
            connectors=connectors,
            registry=registry,
            loader=loader,
        )

        return ToolExecutor(registry, connectors)

    @staticmethod
    def create_storage(config: ToolkitConfig) -> StorageBackend:
        if config.storage_backend == "filesystem":
            return FilesystemStorage(config.storage_root)
        return InMemoryStorage()
