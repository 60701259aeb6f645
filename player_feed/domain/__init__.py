"""
Domain package for Player Feed.

Exports the player record model shared by the transformer, the sender and
the audit log. Keep this package focused on data definitions.
"""

from player_feed.domain.models import Nationality, PlayerRecord

__all__ = [
    "Nationality",
    "PlayerRecord",
]
