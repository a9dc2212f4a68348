import logging
from typing import Any, Callable, Dict, List, Optional

Sender = Callable[[str, str, Any], None]


class ConnectionRegistry:
    """Live connections, in connect order, and the way to reach them.

    ``send`` pushes one event to one connection. Broadcasts call it once
    per connection so a failure on one socket is logged and skipped
    rather than aborting delivery to the rest.
    """

    def __init__(self, send: Sender, logger: Optional[logging.Logger] = None):
        self._send = send
        self._sids: Dict[str, None] = {}
        self.logger = logger or logging.getLogger(__name__)

    def add(self, sid: str) -> None:
        self._sids[sid] = None

    def discard(self, sid: str) -> None:
        self._sids.pop(sid, None)

    def sids(self) -> List[str]:
        return list(self._sids)

    def __contains__(self, sid) -> bool:
        return sid in self._sids

    def __len__(self) -> int:
        return len(self._sids)

    def send_to(self, sid: str, event: str, payload: Any) -> bool:
        try:
            self._send(sid, event, payload)
        except Exception:
            self.logger.exception(f"[deliver-failed] event={event} sid={sid}")
            return False
        return True

    def broadcast(self, event: str, payload: Any, skip_sid: Optional[str] = None) -> int:
        """Send to every live connection except ``skip_sid``; return the delivered count."""
        delivered = 0
        for sid in self.sids():
            if sid == skip_sid:
                continue
            if self.send_to(sid, event, payload):
                delivered += 1
        return delivered
