"""Realtime adapters: change feed fan-out and live gate sessions."""

from .feed import InProcessChangeFeed
from .gates import GateSession, GateSessionStore

__all__ = ["GateSession", "GateSessionStore", "InProcessChangeFeed"]
