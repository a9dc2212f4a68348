"""The session coordinator: one table, a fixed set of roles, one dice round at a time.

All state lives on a single :class:`SessionCoordinator`. Every command runs
to completion under the coordinator lock, including the outbound events it
produces, so each broadcast reflects exactly one state snapshot and
broadcasts reach clients in the order the mutations happened.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .commands import ClaimRole, Command, Connect, Disconnect, SignalReady
from .dice import DiceRoller
from .errors import AlreadyClaimed, InvalidRole, NotOwner, RoleTaken, SessionError
from .registry import ConnectionRegistry
from .roles import parse_roles

# Outbound wire events
ROLE_ASSIGNED = 'roleAssigned'
PLAYERS_UPDATE = 'playersUpdate'
SOMEONE_READY = 'someoneReady'
START_ROLL = 'startRoll'
ERROR_MSG = 'errorMsg'


@dataclass(frozen=True)
class ClaimResult:
    success: bool
    role: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {'success': True, 'role': self.role}
        return {'success': False, 'message': self.message}


class SessionCoordinator:
    def __init__(
        self,
        roles,
        registry: ConnectionRegistry,
        dice: Optional[DiceRoller] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.roles = parse_roles(roles)
        self.registry = registry
        self.dice = dice or DiceRoller()
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        # role -> sid and sid -> role always change together
        self._role_to_sid: Dict[str, str] = {}
        self._sid_to_role: Dict[str, str] = {}
        # dict used as an insertion-ordered set
        self._ready: Dict[str, None] = {}
        self._handlers = {
            Connect: self._connect,
            ClaimRole: self._claim_role,
            SignalReady: self._signal_ready,
            Disconnect: self._disconnect,
        }

    # ---- dispatch ----

    def dispatch(self, command: Command):
        """Run one command inside the critical section and return its result."""
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f'Unsupported session command: {command!r}')
        with self._lock:
            return handler(command)

    def connect(self, sid: str) -> None:
        self.dispatch(Connect(sid))

    def claim_role(self, sid: str, role) -> ClaimResult:
        return self.dispatch(ClaimRole(sid, role))

    def signal_ready(self, sid: str, role) -> bool:
        return self.dispatch(SignalReady(sid, role))

    def disconnect(self, sid: str) -> Optional[str]:
        return self.dispatch(Disconnect(sid))

    # ---- reads ----

    def online_roles(self) -> List[str]:
        with self._lock:
            return list(self._role_to_sid)

    def ready_roles(self) -> List[str]:
        with self._lock:
            return list(self._ready)

    def owner_of(self, role: str) -> Optional[str]:
        with self._lock:
            return self._role_to_sid.get(role)

    def role_of(self, sid: str) -> Optional[str]:
        with self._lock:
            return self._sid_to_role.get(sid)

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                'roles': list(self.roles),
                'players': self._roster(),
                'ready': list(self._ready),
                'connections': len(self.registry),
            }

    # ---- command handlers (lock held) ----

    def _connect(self, command: Connect) -> None:
        self.registry.add(command.sid)
        self.logger.info(f"[connect] sid={command.sid} connections={len(self.registry)}")

    def _claim_role(self, command: ClaimRole) -> ClaimResult:
        sid = command.sid
        try:
            role = self._validate_claim(sid, command.role)
        except SessionError as err:
            self.logger.info(f"[claim-rejected] sid={sid} role={command.role!r} reason={err.kind}")
            result = ClaimResult(success=False, message=err.message, error=err.kind)
            self.registry.send_to(sid, ROLE_ASSIGNED, result.to_dict())
            return result

        self._role_to_sid[role] = sid
        self._sid_to_role[sid] = role
        self.logger.info(f"[claim] role={role} sid={sid}")

        result = ClaimResult(success=True, role=role)
        self.registry.send_to(sid, ROLE_ASSIGNED, result.to_dict())
        self._broadcast_roster()
        return result

    def _validate_claim(self, sid: str, role) -> str:
        if not isinstance(role, str) or role not in self.roles:
            raise InvalidRole()
        if role in self._role_to_sid:
            raise RoleTaken()
        if sid in self._sid_to_role:
            raise AlreadyClaimed()
        return role

    def _signal_ready(self, command: SignalReady) -> bool:
        sid, role = command.sid, command.role
        owner = self._role_to_sid.get(role) if isinstance(role, str) else None
        if owner is None or owner != sid:
            err = NotOwner()
            self.logger.info(f"[ready-rejected] sid={sid} role={role!r} reason={err.kind}")
            self.registry.send_to(sid, ERROR_MSG, {'message': err.message})
            return False

        self._ready[role] = None
        self.registry.broadcast(SOMEONE_READY, {'role': role}, skip_sid=sid)
        self.logger.info(f"[ready] role={role} ready={list(self._ready)}")

        self._evaluate_barrier()
        return True

    def _evaluate_barrier(self) -> Optional[Dict[str, List[int]]]:
        online = list(self._role_to_sid)
        if not online or any(role not in self._ready for role in online):
            return None
        round_points = self.dice.roll_round(online)
        self.registry.broadcast(START_ROLL, {'roundPoints': round_points})
        self._ready.clear()
        self.logger.info(f"[roll] roles={online}")
        return round_points

    def _disconnect(self, command: Disconnect) -> Optional[str]:
        sid = command.sid
        self.registry.discard(sid)
        role = self._sid_to_role.pop(sid, None)
        if role is None:
            self.logger.info(f"[disconnect] sid={sid} role=None")
            return None

        self._role_to_sid.pop(role, None)
        self._ready.pop(role, None)
        # A shrinking roster never starts a round; only a ready signal does.
        self._broadcast_roster()
        self.logger.info(f"[disconnect] sid={sid} role={role}")
        return role

    def _roster(self) -> List[Dict[str, str]]:
        return [{'role': role} for role in self._role_to_sid]

    def _broadcast_roster(self) -> None:
        self.registry.broadcast(PLAYERS_UPDATE, self._roster())
