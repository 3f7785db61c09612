"""
Logging Configuration
Sets up the logger for the simulation core and the viewer.
"""
import logging
import sys
from typing import Optional

# the viewer regenerates the mesh on every reset
MESH_LOGGER = "topopt.mesh"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  mesh_level: int = logging.WARNING) -> logging.Logger:
    """
    Configures the logger for the 'topopt' namespace.

    Args:
        level: Logging level for the solver and viewer messages.
        log_file: Optional path to save logs to a file.
        mesh_level: Level for mesh generation messages, quieter than
            `level` by default so resets do not repeat the mesh summary.
    """
    logger = logging.getLogger("topopt")
    logger.setLevel(level)
    logging.getLogger(MESH_LOGGER).setLevel(max(level, mesh_level))

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s %(levelname)-7s %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %d handler(s), mesh messages at %s",
                 len(handlers), logging.getLevelName(max(level, mesh_level)))
    return logger
