"""
base.py - MonitoredNode base class

Node with enter/exit logging, used by every journal pipeline node.
"""

import logging
import time

from pocketflow import Node

logger = logging.getLogger(__name__)


class MonitoredNode(Node):
    """
    Node that logs when it starts, finishes or fails.

    Retries and fallbacks are pocketflow's; failures are logged and re-raised.
    """

    def _run(self, shared):
        name = type(self).__name__
        start = time.perf_counter()
        logger.debug("enter %s", name)
        try:
            action = super()._run(shared)
        except Exception:
            logger.exception("%s failed", name)
            raise
        logger.debug("exit %s -> %s (%.3fs)", name, action, time.perf_counter() - start)
        return action
