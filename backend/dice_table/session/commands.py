from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Connect:
    sid: str


@dataclass(frozen=True)
class ClaimRole:
    sid: str
    role: Any


@dataclass(frozen=True)
class SignalReady:
    sid: str
    role: Any


@dataclass(frozen=True)
class Disconnect:
    sid: str


Command = Union[Connect, ClaimRole, SignalReady, Disconnect]
