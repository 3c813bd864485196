"""Single-deck blackjack round engine - 100% UI-agnostic."""

from blackjack.errors import BlackjackError, EmptyDeckError, IllegalActionError, InvalidBetError
from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.game import Outcome, Round, RoundState
from blackjack.table import Table

__all__ = [
    "BlackjackError",
    "EmptyDeckError",
    "IllegalActionError",
    "InvalidBetError",
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "Round",
    "RoundState",
    "Table",
]
