"""
sentry.py

This module handles optional Sentry error tracking for the client.

The transport reports failed requests here. Every helper is a no-op until
init_sentry() succeeds, so importing the client never contacts Sentry on its own.
"""

import sentry_sdk
from typing import Optional
from confluxscan import __version__
from confluxscan.utils.logger import get_logger
from confluxscan.utils.config import get_config

logger = get_logger(__name__)

# Set once init_sentry() succeeds
_sentry_initialized = False


def init_sentry() -> bool:
    """
    Initializes the Sentry SDK from configuration.

    Sentry is left uninitialized when it is disabled or the DSN is missing.

    Returns:
        bool: True if Sentry is initialized, False otherwise.
    """
    global _sentry_initialized

    if _sentry_initialized:
        logger.info("Sentry already initialized")
        return True

    config = get_config()

    if not config.SENTRY_ENABLED:
        logger.info("Sentry is disabled via configuration")
        return False

    if not config.SENTRY_DSN:
        logger.warning("Sentry is enabled but DSN is not configured")
        return False

    try:
        sentry_sdk.init(
            dsn=config.SENTRY_DSN,
            environment=config.SENTRY_ENVIRONMENT,
            traces_sample_rate=config.SENTRY_TRACES_SAMPLE_RATE,
            release=f"confluxscan-espace@{__version__}",
            attach_stacktrace=True,
            send_default_pii=False,
        )
        _sentry_initialized = True
        logger.info(f"Sentry initialized for environment: {config.SENTRY_ENVIRONMENT}")
        return True
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")
        return False


def capture_exception(error: Exception, context: Optional[dict] = None) -> Optional[str]:
    """
    Sends an exception to Sentry.

    Args:
        error (Exception): The exception to capture.
        context (Optional[dict]): Named context blocks attached to the event.

    Returns:
        Optional[str]: The event ID, or None when nothing was sent.
    """
    if not _sentry_initialized:
        return None

    try:
        with sentry_sdk.new_scope() as scope:
            for key, value in (context or {}).items():
                scope.set_context(key, value)
            event_id = sentry_sdk.capture_exception(error)

        logger.debug(f"Exception captured by Sentry with event ID: {event_id}")
        return event_id
    except Exception as e:
        logger.error(f"Failed to capture exception in Sentry: {e}")
        return None


def capture_message(message: str, level: str = 'info', context: Optional[dict] = None) -> Optional[str]:
    """
    Sends a message to Sentry.

    Args:
        message (str): The message to capture.
        level (str): Severity ('debug', 'info', 'warning', 'error', 'fatal').
        context (Optional[dict]): Named context blocks attached to the event.

    Returns:
        Optional[str]: The event ID, or None when nothing was sent.
    """
    if not _sentry_initialized:
        return None

    try:
        with sentry_sdk.new_scope() as scope:
            for key, value in (context or {}).items():
                scope.set_context(key, value)
            event_id = sentry_sdk.capture_message(message, level=level)

        logger.debug(f"Message captured by Sentry with event ID: {event_id}")
        return event_id
    except Exception as e:
        logger.error(f"Failed to capture message in Sentry: {e}")
        return None


def add_breadcrumb(message: str, category: str = 'default',
                   level: str = 'info', data: Optional[dict] = None) -> None:
    """
    Records a breadcrumb that is attached to later Sentry events.

    Args:
        message (str): The breadcrumb message.
        category (str): The breadcrumb category.
        level (str): The severity level.
        data (Optional[dict]): Extra data for the breadcrumb.
    """
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.add_breadcrumb(
            message=message,
            category=category,
            level=level,
            data=data or {}
        )
    except Exception as e:
        logger.error(f"Failed to add breadcrumb in Sentry: {e}")


def close_sentry(timeout: int = 2) -> None:
    """
    Flushes pending events and marks Sentry as closed.

    Args:
        timeout (int): Seconds to wait for pending events.
    """
    global _sentry_initialized

    if not _sentry_initialized:
        logger.debug("Sentry not initialized, nothing to close")
        return

    try:
        sentry_sdk.flush(timeout=timeout)
        _sentry_initialized = False
        logger.info("Sentry client closed")
    except Exception as e:
        logger.error(f"Failed to close Sentry client: {e}")
