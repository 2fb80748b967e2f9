"""Message loading interface and implementations.

Defines the contract for loading message catalogs and provides a YAML-based
loader reading ``<domain>.<locale>.yml`` resource files.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, Optional

import yaml

import structlog
from infrastructure.i18n.models import MessageCatalog

logger = structlog.get_logger()


class MessageLoader(ABC):
    """Abstract base for message catalog loaders.

    Implementations must define how to load and parse message resources for a
    locale code.
    """

    @abstractmethod
    def load(self, locale: str) -> MessageCatalog:
        """Load the message catalog for a locale code.

        Args:
            locale: Locale code to load (e.g. "en").

        Returns:
            MessageCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no resource exists for the locale.
            ValueError: If a resource cannot be parsed.
        """

    @abstractmethod
    def load_all(
        self, locales: Optional[Iterable[str]] = None
    ) -> Dict[str, MessageCatalog]:
        """Load catalogs for every available locale.

        Args:
            locales: Restrict loading to these codes.

        Returns:
            Dict mapping locale code to MessageCatalog.
        """


class YAMLMessageLoader(MessageLoader):
    """Loader for YAML-based message files.

    Expects files named ``<domain>.<locale>.yml`` (e.g. ``home.en.yml``) in the
    configured directory. Every file of a locale is merged into one catalog.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        use_cache: Whether parsed catalogs are kept in memory.
        supported_locales: Codes load_all() may discover; None allows any.
        cache: Loaded catalogs by locale code.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
        supported_locales: Optional[Iterable[str]] = None,
    ):
        """Initialize YAML message loader.

        Args:
            translations_dir: Path to directory with YAML message files.
            use_cache: Whether to cache loaded catalogs in memory.
            supported_locales: Restrict discovered locales to these codes.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.supported_locales = (
            None if supported_locales is None else frozenset(supported_locales)
        )
        self.cache: Dict[str, MessageCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: str) -> MessageCatalog:
        """Load messages for a locale from YAML files.

        Searches for files matching ``*.<locale>.yml`` and merges them in
        sorted file name order.

        Args:
            locale: Locale code to load.

        Returns:
            MessageCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = sorted(self.translations_dir.glob(f"*.{locale}.yml"))
        if not yaml_files:
            raise FileNotFoundError(
                f"No message files found for locale {locale} in {self.translations_dir}"
            )

        catalog = MessageCatalog(
            locale=locale,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(catalog, data, yaml_file)

        logger.info(
            "loaded_messages",
            locale=locale,
            file_count=len(yaml_files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def available_locales(self) -> list[str]:
        """List locale codes that have at least one message file.

        Returns:
            Sorted locale codes taken from file names.
        """
        found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "home.en.yml" -> stem "home.en" -> "en"
            parts = yaml_file.stem.split(".")
            if len(parts) >= 2:
                found.add(parts[-1])
        return sorted(found)

    def load_all(
        self, locales: Optional[Iterable[str]] = None
    ) -> Dict[str, MessageCatalog]:
        """Load catalogs for all supported locales found on disk.

        Args:
            locales: Restrict loading to these codes. Defaults to every
                discovered code within supported_locales.

        Returns:
            Dict mapping each locale code to its MessageCatalog.

        Raises:
            ValueError: If no message files are found at all.
        """
        available = self.available_locales()
        if not available:
            raise ValueError(f"No message files found in {self.translations_dir}")

        if locales is None:
            locales = available
            if self.supported_locales is not None:
                locales = [c for c in available if c in self.supported_locales]
        wanted = [c for c in locales if c in available]
        return {code: self.load(code) for code in wanted}

    def _merge_yaml_data(
        self,
        catalog: MessageCatalog,
        data: Dict,
        source_file: Path,
    ) -> None:
        """Merge parsed YAML data into a catalog.

        Expected format:
        Namespace:
          key1: message1
          key2: message2

        Args:
            catalog: MessageCatalog to merge into.
            data: Parsed YAML data.
            source_file: Source file (for logging).
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        valid = {}
        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_namespace_format",
                    namespace=namespace,
                    file=str(source_file),
                    expected="dict",
                )
                continue
            valid[namespace] = messages

        catalog.merge(MessageCatalog(locale=catalog.locale, messages=valid))

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_message_cache")
