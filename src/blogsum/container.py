"""
Dependency container wiring configuration to blogsum components.
"""

from __future__ import annotations

import asyncio
import inspect
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any, AsyncIterator, Callable, Dict, Generic, List, Optional, TypeVar

import structlog

from blogsum.config import Config

if TYPE_CHECKING:
    from blogsum.crawler import HttpClient, WebScraper
    from blogsum.providers import CohereClient, CohereCombinedProvider, SummaryChain, TranslationChain
    from blogsum.storage import SQLiteArticleStore

T = TypeVar("T")


class LazyInstance(Generic[T]):
    """Lazy-loaded instance with lifecycle management."""

    def __init__(self, factory: Callable[..., T], *args: Any, **kwargs: Any) -> None:
        self._factory = factory
        self._args = args
        self._kwargs = kwargs
        self._instance: Optional[T] = None
        self._initialized = False

    async def get(self) -> T:
        """Get or create the instance, awaiting its ``initialize`` if it has one."""
        if not self._initialized:
            self._instance = self._factory(*self._args, **self._kwargs)
            initialize = getattr(self._instance, "initialize", None)
            if callable(initialize):
                await initialize()
            self._initialized = True
        assert self._instance is not None
        return self._instance

    @property
    def created(self) -> bool:
        return self._initialized

    async def cleanup(self) -> None:
        close = getattr(self._instance, "close", None)
        if self._instance is not None and callable(close):
            await close()
        self._instance = None
        self._initialized = False


class DependencyContainer:
    """
    Builds and owns the long-lived blogsum components.

    Network clients and the database are created on first use and closed on
    shutdown; the provider chains are cheap and rebuilt from configuration.
    """

    def __init__(self, config: Optional[Config] = None, config_path: Optional[Path] = None) -> None:
        self.config_path = config_path
        self.config: Optional[Config] = config
        self.logger = structlog.get_logger(self.__class__.__name__)
        self._instances: Dict[str, LazyInstance[Any]] = {}
        self._instances_lock = asyncio.Lock()
        self._shutdown_handlers: List[Callable[[], Any]] = []
        self.is_running = False

    async def initialize(self) -> None:
        if self.config is None:
            self.load_config()
        self._create_instances()
        self.is_running = True
        self.logger.info(
            "Dependency container initialized",
            config_path=str(self.config_path) if self.config_path else "default",
        )

    def load_config(self) -> None:
        if self.config_path and self.config_path.exists():
            self.config = Config.from_yaml(self.config_path)
        else:
            self.config = Config()

    def _create_instances(self) -> None:
        if self.config is None:
            raise RuntimeError("Configuration must be loaded before creating instances")

        # Imported here to keep `import blogsum.container` cheap for the CLI
        from blogsum.crawler import HttpClient
        from blogsum.providers import CohereClient
        from blogsum.storage import SQLiteArticleStore

        self._instances = {
            "http_client": LazyInstance(HttpClient, self.config.scraper),
            "cohere": LazyInstance(CohereClient, self.config.cohere),
            "storage": LazyInstance(SQLiteArticleStore, self.config.storage),
        }

    def _require_config(self) -> Config:
        if self.config is None:
            raise RuntimeError("Container is not initialized")
        return self.config

    async def _get(self, name: str) -> Any:
        async with self._instances_lock:
            return await self._instances[name].get()

    async def get_http_client(self) -> HttpClient:
        return await self._get("http_client")  # type: ignore[no-any-return]

    async def get_cohere(self) -> CohereClient:
        return await self._get("cohere")  # type: ignore[no-any-return]

    async def get_storage(self) -> SQLiteArticleStore:
        return await self._get("storage")  # type: ignore[no-any-return]

    async def get_scraper(self) -> WebScraper:
        from blogsum.crawler import WebScraper

        config = self._require_config()
        return WebScraper(config.scraper, http_client=await self.get_http_client())

    async def get_summary_chain(self) -> SummaryChain:
        from blogsum.providers import CohereSummaryProvider, SummaryChain
        from blogsum.summarizer import ExtractiveSummaryProvider

        config = self._require_config()
        providers: List[Any] = []
        if config.summarizer.use_hosted:
            cohere = await self.get_cohere()
            if cohere.enabled:
                providers.append(CohereSummaryProvider(cohere))
        providers.append(ExtractiveSummaryProvider())
        return SummaryChain(providers)

    async def get_translation_chain(self, offline: bool = False) -> TranslationChain:
        from blogsum.providers import CohereTranslationProvider, TranslationChain
        from blogsum.urdu import DictionaryTranslationProvider

        config = self._require_config()
        providers: List[Any] = []
        if config.translator.use_hosted and not offline:
            cohere = await self.get_cohere()
            if cohere.enabled:
                providers.append(CohereTranslationProvider(cohere))
        providers.append(DictionaryTranslationProvider())
        return TranslationChain(
            providers,
            max_retries=config.translator.max_retries,
            retry_base_delay=config.translator.retry_base_delay,
            min_quality_score=config.translator.min_quality_score,
        )

    async def get_combined_provider(self) -> Optional[CohereCombinedProvider]:
        """Return the single-call provider when it is enabled and configured, else None."""
        from blogsum.providers import CohereCombinedProvider

        config = self._require_config()
        if not (config.summarizer.combined and config.summarizer.use_hosted):
            return None
        cohere = await self.get_cohere()
        if not cohere.enabled:
            return None
        return CohereCombinedProvider(cohere, min_quality_score=config.translator.min_quality_score)

    @asynccontextmanager
    async def lifecycle(self) -> AsyncIterator[DependencyContainer]:
        """Context manager for proper lifecycle management."""
        try:
            await self.initialize()
            yield self
        finally:
            await self.shutdown()

    async def shutdown(self) -> None:
        """Run shutdown handlers, then close every created instance."""
        if not self.is_running:
            return

        for handler in self._shutdown_handlers:
            try:
                result = handler()
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self.logger.error("Error in shutdown handler", error=str(e))

        await self._cleanup_instances()
        self.is_running = False
        self.logger.info("Dependency container shutdown complete")

    async def _cleanup_instances(self) -> None:
        for name, instance in self._instances.items():
            try:
                await instance.cleanup()
            except Exception as e:
                self.logger.error("Error cleaning up instance", instance=name, error=str(e))

    def add_shutdown_handler(self, handler: Callable[[], Any]) -> None:
        self._shutdown_handlers.append(handler)

    def get_health_status(self) -> Dict[str, Any]:
        return {
            "is_running": self.is_running,
            "config_loaded": self.config is not None,
            "instances_created": sorted(name for name, inst in self._instances.items() if inst.created),
            "config_path": str(self.config_path) if self.config_path else None,
        }
