"""
Outbound Event Models

Describes a message the coordinator wants the transport layer to send.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Emission:
    """A single outbound Socket.IO event.

    ``to`` is either a room id (broadcast to every member) or a client sid.
    A ``data`` of None sends the event without a payload.
    """
    event: str
    to: str
    data: Optional[Any] = None

    @property
    def args(self) -> tuple:
        return () if self.data is None else (self.data,)
