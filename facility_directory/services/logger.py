import json
import logging

from facility_directory.core.config import settings

log = logging.getLogger("facility_directory.debug")


def log_debug(event: str, data: dict):
    """
    Logs structured debug info if enabled.
    """
    if not settings.DEBUG_MODE:
        return

    log.info("[DEBUG] %s: %s", event, json.dumps(data, indent=2, default=str))
