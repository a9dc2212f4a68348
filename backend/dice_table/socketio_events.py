from flask import request
from dice_table import get_coordinator, socketio

NAMESPACE = '/'


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _role_from(data):
    return data.get('role') if isinstance(data, dict) else None


def send_to_sid(sid: str, event: str, payload) -> None:
    """Deliver one outbound event to one connection."""
    socketio.emit(event, payload, to=sid, namespace=NAMESPACE)


def handle_connect(auth=None):
    get_coordinator().connect(_get_sid())


def handle_disconnect(reason=None):
    get_coordinator().disconnect(_get_sid())


def handle_select_role(data=None):
    get_coordinator().claim_role(_get_sid(), _role_from(data))


def handle_player_ready(data=None):
    get_coordinator().signal_ready(_get_sid(), _role_from(data))


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the default namespace.

    Event names match the browser client: ``selectRole`` and
    ``playerReady`` in; ``roleAssigned``, ``playersUpdate``,
    ``someoneReady``, ``startRoll`` and ``errorMsg`` out.
    """
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('selectRole', handle_select_role, namespace=NAMESPACE)
    socketio.on_event('playerReady', handle_player_ready, namespace=NAMESPACE)
