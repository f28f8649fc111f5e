import logging
import threading
from typing import Any, Callable, Dict, Optional, Set

SendFn = Callable[[Dict[str, Any], str], None]


class ViewerBroadcaster:
    """Registry of connected viewer sessions and best-effort fan-out.

    ``send(payload, sid)`` delivers one payload to one viewer; the app
    factory wires it to a Socket.IO emit. A failing send is logged and
    the remaining viewers still receive the payload.
    """

    def __init__(self, send: SendFn, logger: Optional[logging.Logger] = None):
        self._send = send
        self._viewers: Set[str] = set()
        self._lock = threading.Lock()
        self.logger = logger or logging.getLogger(__name__)

    def register(self, sid: str) -> None:
        with self._lock:
            self._viewers.add(sid)

    def unregister(self, sid: str) -> None:
        with self._lock:
            self._viewers.discard(sid)

    @property
    def viewer_count(self) -> int:
        with self._lock:
            return len(self._viewers)

    def send_to(self, sid: str, payload: Dict[str, Any]) -> bool:
        try:
            self._send(payload, sid)
        except Exception as exc:
            self.logger.warning(f"[broadcast-fail] viewer={sid} error={exc!r}")
            return False
        return True

    def broadcast(self, payload: Dict[str, Any]) -> int:
        """Send ``payload`` to every registered viewer. Returns the delivered count."""
        with self._lock:
            viewers = list(self._viewers)
        delivered = sum(1 for sid in viewers if self.send_to(sid, payload))
        self.logger.debug(f"[broadcast] delivered={delivered}/{len(viewers)}")
        return delivered
