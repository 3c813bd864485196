"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: AWAITING_BET → PLAYER_TURN → DEALER_TURN → RESOLVED
    """

    # No cards dealt yet
    AWAITING_BET = auto()

    # Player may hit or stand
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_TURN = auto()

    # Payout applied, terminal
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Trigger name -> (source, dest); the round's state machine is built from this
ROUND_TRIGGERS: dict[str, tuple[RoundState, RoundState]] = {
    "deal_cards": (RoundState.AWAITING_BET, RoundState.PLAYER_TURN),
    # RESOLVED straight from PLAYER_TURN on a natural or a bust
    "player_blackjack": (RoundState.PLAYER_TURN, RoundState.RESOLVED),
    "player_busts": (RoundState.PLAYER_TURN, RoundState.RESOLVED),
    "player_done": (RoundState.PLAYER_TURN, RoundState.DEALER_TURN),
    "dealer_done": (RoundState.DEALER_TURN, RoundState.RESOLVED),
}

# Valid state transitions
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    state: [dest for source, dest in ROUND_TRIGGERS.values() if source is state]
    for state in RoundState
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
