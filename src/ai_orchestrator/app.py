"""
Main application class for the AI Orchestrator server.
"""

from contextlib import asynccontextmanager
from typing import List, Optional

from ai_orchestrator import __version__
from ai_orchestrator.config.settings import Settings, load_config
from ai_orchestrator.dispatch.dispatcher import Dispatcher
from ai_orchestrator.mcp.server import OrchestratorServer
from ai_orchestrator.providers import ProviderClient, create_providers
from ai_orchestrator.tools.catalog import build_registry
from ai_orchestrator.tools.registry import ToolRegistry
from ai_orchestrator.utils.logging import configure_logging, get_logger


class OrchestratorApp:
    """
    Wires settings, providers, the tool registry, the dispatcher and the
    MCP server together.

    Example usage:
        app = OrchestratorApp(config_path="ai_orchestrator.config.yaml")
        await app.serve()
    """

    def __init__(
        self,
        name: str = "ai-orchestrator",
        config_path: Optional[str] = None,
        settings: Optional[Settings] = None,
        log_level: Optional[str] = None,
    ):
        """
        Initialize the application.

        Args:
            name: Name of the application, used for the logger.
            config_path: Path to configuration file (if not provided, looks for ai_orchestrator.config.yaml).
            settings: Settings object (if provided, takes precedence over config_path).
            log_level: Log level overriding the configured one.
        """
        self.name = name
        self._config_path = config_path
        self._settings = settings
        self._log_level = log_level

        self._logger = None
        self._initialized = False

        self.providers: List[ProviderClient] = []
        self.registry: Optional[ToolRegistry] = None
        self.dispatcher: Optional[Dispatcher] = None
        self.server: Optional[OrchestratorServer] = None

    @property
    def config(self) -> Settings:
        """Get the current application configuration."""
        if self._settings is None:
            raise RuntimeError(
                "OrchestratorApp not initialized. Please call initialize() first, or use async with app.run()."
            )
        return self._settings

    @property
    def logger(self):
        """Get the application logger."""
        if self._logger is None:
            self._logger = get_logger(f"ai_orchestrator.{self.name}")
        return self._logger

    def initialize(self) -> None:
        """Load configuration and build the dispatch stack."""
        if self._initialized:
            return

        # Credentials are read here, once per process
        if self._settings is None:
            self._settings = load_config(self._config_path)
        config = self._settings

        configure_logging(
            self._log_level or config.logging.level,
            add_file_handler=config.logging.file_path,
        )

        self.providers = create_providers(config)
        self.registry = build_registry(self.providers)
        self.dispatcher = Dispatcher(self.registry)
        self.server = OrchestratorServer(
            self.dispatcher,
            self.registry,
            name=config.server.name,
            version=config.server.version or __version__,
        )

        missing = [provider.settings.api_key_env for provider in self.providers if not provider.has_credential]
        if missing:
            self.logger.warning(f"Providers disabled until credentials are set: {', '.join(missing)}")

        self._initialized = True
        self.logger.info(
            f"OrchestratorApp initialized - app_name: {self.name}, tools: {len(self.registry)}"
        )

    @asynccontextmanager
    async def run(self):
        """
        Run the application as an async context manager.

        Yields:
            The initialized application instance.
        """
        self.initialize()
        try:
            yield self
        finally:
            self.logger.debug(f"OrchestratorApp shutting down - app_name: {self.name}")

    async def serve(self) -> None:
        """Serve MCP requests over stdio until the client disconnects."""
        async with self.run():
            await self.server.run_stdio_async()
