"""Round engine and state management."""

from blackjack.game.events import GameEvent, EventEmitter, EventType
from blackjack.game.state import RoundState
from blackjack.game.dealer import DEALER_STAND_THRESHOLD, dealer_should_hit, play_dealer_hand
from blackjack.game.resolver import Outcome, Resolution, resolve
from blackjack.game.engine import Round

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundState",
    "DEALER_STAND_THRESHOLD",
    "dealer_should_hit",
    "play_dealer_hand",
    "Outcome",
    "Resolution",
    "resolve",
    "Round",
]
