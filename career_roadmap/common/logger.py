"""
Logging for the career roadmap package.

Messages are tagged with the emitting component and, once bound, the id of
the request being served:

    [run:1a2b3c4d] [service] Fallback roadmap for 'Nurse' rendered from generic
"""

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "career_roadmap"

_debug_mode = False


def set_global_debug_mode(enabled: bool) -> None:
    """Turn DEBUG output on or off for every career_roadmap logger."""
    global _debug_mode
    _debug_mode = enabled
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if enabled else logging.NOTSET)


def is_debug_mode() -> bool:
    return _debug_mode


class RoadmapLogger:
    """Thin wrapper over a stdlib logger that prefixes run id and component."""

    def __init__(self, name: str, component: Optional[str] = None, run_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.component = component
        self.run_id = run_id

    def bind(self, run_id: str) -> "RoadmapLogger":
        """Same logger, tagged with a per-request run id."""
        return RoadmapLogger(self.logger.name, component=self.component, run_id=run_id)

    def _tag(self, message: str) -> str:
        tags = []
        if self.run_id:
            tags.append(f"[run:{self.run_id[:8]}]")
        if self.component:
            tags.append(f"[{self.component}]")
        return " ".join(tags + [message])

    def debug(self, message: str, **kwargs):
        self.logger.debug(self._tag(message), **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(self._tag(message), **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(self._tag(message), **kwargs)


def setup_logging(level: str = "INFO") -> None:
    """
    Send log output to stderr at the given level.

    stdout is left free for the generated document. Existing root handlers
    are replaced.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(name: str, component: Optional[str] = None) -> RoadmapLogger:
    """Return a RoadmapLogger for a module, tagged with its component name."""
    return RoadmapLogger(name, component=component)


if os.getenv("DEBUG_MODE", "false").lower() == "true":
    set_global_debug_mode(True)
