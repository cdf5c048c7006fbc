#
# PROJECT: cube-wireframe
# MODULE: cube_wireframe/log.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Logging setup for runners and CLIs.

Library modules just call ``logging.getLogger(__name__)``; only entry
points configure handlers.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_default_logging(level="INFO", filename=None):
    """Configure the root logger once.

    No-op when the root logger already has handlers, so an application
    that set up logging itself keeps its configuration.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=lvl, format=LOG_FORMAT, filename=filename)
