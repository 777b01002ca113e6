"""Game domain services: matchmaking, room lifecycle and scoring.

Socket handlers and HTTP routes go through ``GameService``; the modules
below it never touch Flask request state, keeping transport concerns
separated from core game mechanics.
"""

from .service import GameService
from .settings import GameSettings

__all__ = ['GameService', 'GameSettings']
