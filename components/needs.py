"""components.needs — Need kinds and queued / in-progress need orders."""

from __future__ import annotations
from dataclasses import dataclass


NEED_HEAL = "heal"
NEED_EAT = "eat"
NEED_SLEEP = "sleep"
NEED_ENTERTAIN = "entertain"

NEED_KINDS = (NEED_HEAL, NEED_EAT, NEED_SLEEP, NEED_ENTERTAIN)


@dataclass
class NeedOrder:
    """A need the actor is seeking or satisfying.

    While queued (``pending_need``) ``remaining`` is the full duration.
    While active it counts down to zero (s).
    """
    kind: str
    remaining: float
