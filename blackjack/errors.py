"""Exceptions raised by the round engine."""


class BlackjackError(Exception):
    """Base class for all engine errors."""


class InvalidBetError(BlackjackError, ValueError):
    """Bet is not a positive whole amount covered by the balance."""

    def __init__(self, bet: object, balance: int, message: str | None = None) -> None:
        self.bet = bet
        self.balance = balance
        super().__init__(message or f"Invalid bet {bet!r} for balance {balance}")


class IllegalActionError(BlackjackError):
    """Action requested in a state that does not allow it."""

    def __init__(self, action: str, state: object) -> None:
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} in state {state}")


class EmptyDeckError(BlackjackError, IndexError):
    """Draw requested from an exhausted deck."""

    def __init__(self) -> None:
        super().__init__("Cannot draw from empty deck")
