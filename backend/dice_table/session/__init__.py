"""Session domain: role ownership, readiness and dice rounds.

This package holds the coordinator and the small pieces it is built from.
It knows nothing about Flask or Socket.IO; the socket handlers feed it
commands and hand it a send function for outbound events.
"""

from .commands import ClaimRole, Connect, Disconnect, SignalReady
from .coordinator import ClaimResult, SessionCoordinator
from .dice import DiceRoller
from .errors import AlreadyClaimed, InvalidRole, NotOwner, RoleTaken, SessionError
from .registry import ConnectionRegistry
from .roles import DEFAULT_ROLES, parse_roles

__all__ = [
    'AlreadyClaimed',
    'ClaimResult',
    'ClaimRole',
    'Connect',
    'ConnectionRegistry',
    'DEFAULT_ROLES',
    'DiceRoller',
    'Disconnect',
    'InvalidRole',
    'NotOwner',
    'RoleTaken',
    'SessionCoordinator',
    'SessionError',
    'SignalReady',
    'parse_roles',
]
