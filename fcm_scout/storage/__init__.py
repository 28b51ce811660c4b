"""
Storage Module
Read-only access to the bundled fallback player data
"""

from .local_players import load_local_players

__all__ = ["load_local_players"]
