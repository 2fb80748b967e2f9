"""Structlog configuration and logger setup.

Configures structlog once per process with environment-aware rendering:
console output in development, JSON lines in production, and silence
under pytest.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at app startup
    configure_logging(settings=settings)

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("locale_switched", locale="th")

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Any, Callable, Optional, Sequence, TYPE_CHECKING

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import add_app_info, mask_sensitive_data

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "site-locale-router"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _configure_for_tests() -> BoundLogger:
    logging.root.setLevel(logging.CRITICAL + 1)

    # Basic processors avoid errors; nothing is emitted because the root
    # logger level sits above CRITICAL.
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=logging.CRITICAL + 1,
        force=True,
    )
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    extra_processors: Optional[Sequence[Callable[..., Any]]] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        settings: Application settings. Loaded from the environment when
            omitted and no explicit overrides are given.
        log_level: Optional override for settings.LOG_LEVEL.
        is_production: Optional override for settings.is_production. Controls
            JSON vs console output.
        extra_processors: Processors inserted before the renderer.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        return _configure_for_tests()

    if settings is None and (log_level is None or is_production is None):
        from infrastructure.configuration import Settings

        settings = Settings()

    prod_mode = is_production if is_production is not None else settings.is_production
    effective_log_level = log_level or settings.LOG_LEVEL

    processors = [
        # Correlation IDs and request metadata bound by the locale middleware
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_app_info(APP_NAME, settings.GIT_SHA if settings else "unknown"),
        mask_sensitive_data(),
    ]
    processors.extend(extra_processors or [])

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Automatically detects the calling module and binds component
    and module_path context for structured logging.

    Returns:
        Logger instance with module context

    Example:
        # In modules/i18n/core/use_cases.py
        logger = get_module_logger()
        # context: {"component": "use_cases", "module_path": "modules.i18n.core.use_cases"}

        logger.info("locale_switched", locale="th")
    """
    logger = structlog.stdlib.get_logger()

    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return logger.bind(component=parts[-1], module_path=module_name)

    return logger.bind(component="unknown")
