"""Recoverable game-rule failures.

Every action handler validates its preconditions before touching state and
raises one of these on failure, so a rejected action never leaves a partial
change behind.  They subclass ValueError so callers that only care about
"the request was not legal" can keep catching ValueError.

Unknown hex/tech/part ids are *not* represented here: they indicate a malformed
request and surface as KeyError from the catalog and map lookups.
"""

from __future__ import annotations


class GameError(ValueError):
    """Base class for rule violations.  ``code`` is stable and machine-readable."""

    code = "game_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InsufficientFunds(GameError):
    code = "insufficient_funds"

    def __init__(self, resource: str, needed: int, available: int):
        super().__init__(f"Insufficient {resource.lower()}: need {needed}, have {available}")
        self.resource = resource
        self.needed = needed
        self.available = available


class InsufficientMoney(InsufficientFunds):
    def __init__(self, needed: int, available: int):
        super().__init__("Money", needed, available)


class InsufficientScience(InsufficientFunds):
    def __init__(self, needed: int, available: int):
        super().__init__("Science", needed, available)


class InsufficientMaterials(InsufficientFunds):
    def __init__(self, needed: int, available: int):
        super().__init__("Materials", needed, available)


class InsufficientInfluence(GameError):
    code = "insufficient_influence"


class NoSelection(GameError):
    code = "no_selection"


class InvalidTarget(GameError):
    code = "invalid_target"


class NotAvailable(GameError):
    code = "not_available"


class PartLocked(GameError):
    code = "part_locked"


class InvalidSlot(GameError):
    code = "invalid_slot"


class CapacityExceeded(GameError):
    code = "capacity_exceeded"


class NotYourTurn(GameError):
    code = "not_your_turn"


class StateInvariantError(RuntimeError):
    """A transition produced a state that breaks a GameState invariant (a bug, not a rule)."""
