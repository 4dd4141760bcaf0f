"""TrackAScholar Entry Point — composition root for the registry shell.

Invariants:
    - Logging configured from Settings before anything else logs
    - The returned manager already holds whatever the data file stored
    - A data file that fails to load propagates after RegistryManager.load logs it

Design Decisions:
    - One function instead of module-level globals: callers and tests pass their own Settings
"""

import logging

from trackascholar.config import Settings, get_settings
from trackascholar.infrastructure.observability import setup_logging
from trackascholar.services.registry_manager import RegistryManager, create_registry_manager

logger = logging.getLogger(__name__)


def start(settings: Settings | None = None) -> RegistryManager:
    """Configure logging, build the manager and load the data file."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = create_registry_manager(settings)
    manager.load()
    logger.info(
        "TrackAScholar started",
        extra={"file_path": settings.data_file_path, "count": len(manager.registry)},
    )
    return manager
