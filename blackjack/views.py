"""Pydantic read-only projections handed to renderers."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from blackjack.cards import Card
from blackjack.hand import Hand
from blackjack.game.resolver import Outcome


class CardView(BaseModel):
    """Card identity as a (rank, suit) pair."""

    model_config = ConfigDict(frozen=True)

    rank: str
    suit: str
    value: int
    code: str

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        return cls(
            rank=str(card.rank),
            suit=card.suit.name.lower(),
            value=card.value,
            code=card.code,
        )


class ConcealedCardView(BaseModel):
    """Face-down marker; carries no card identity."""

    model_config = ConfigDict(frozen=True)

    concealed: Literal[True] = True


CONCEALED = ConcealedCardView()


class HandView(BaseModel):
    """Hand as an outside viewer may see it."""

    model_config = ConfigDict(frozen=True)

    role: Literal["player", "dealer"]
    cards: list[CardView | ConcealedCardView]
    value: int | None  # None while a card is face down
    is_soft: bool
    is_busted: bool
    is_natural: bool


class DealerValueView(BaseModel):
    """
    Dealer score for display.

    While the first card is face down only the visible card's base value
    is known, rendered as ``? + 9``; afterwards the full total.
    """

    model_config = ConfigDict(frozen=True)

    concealed: bool
    visible: int
    total: int | None

    def __str__(self) -> str:
        if self.concealed:
            return f"? + {self.visible}"
        return str(self.total)


class RoundStarted(BaseModel):
    """Opening cards dealt; the player is to act."""

    model_config = ConfigDict(frozen=True)

    bet: int
    balance: int
    player_hand: HandView
    dealer_hand: HandView


class Drawn(BaseModel):
    """Player hit and the round continues."""

    model_config = ConfigDict(frozen=True)

    card: CardView
    player_hand: HandView


class RoundEnded(BaseModel):
    """Round resolved and payout applied."""

    model_config = ConfigDict(frozen=True)

    outcome: Outcome
    bet: int
    payout: int
    net: int
    balance: int
    player_hand: HandView
    dealer_hand: HandView


class TableSnapshot(BaseModel):
    """Everything a renderer needs to draw the table."""

    model_config = ConfigDict(frozen=True)

    state: str
    balance: int
    bet: int
    player_hand: HandView
    dealer_hand: HandView
    player_value: int
    dealer_value: str
    outcome: Outcome | None
    can_hit: bool
    can_stand: bool


def hand_view(hand: Hand) -> HandView:
    """Project a hand, replacing any face-down card by the concealed marker."""
    cards: list[CardView | ConcealedCardView] = [
        CONCEALED if i == hand.concealed_index else CardView.from_card(card)
        for i, card in enumerate(hand.cards)
    ]
    concealed = hand.is_concealed
    return HandView(
        role=hand.role,
        cards=cards,
        value=None if concealed else hand.value,
        is_soft=False if concealed else hand.is_soft,
        is_busted=False if concealed else hand.is_busted,
        is_natural=False if concealed else hand.is_natural,
    )


def dealer_value_view(hand: Hand) -> DealerValueView:
    visible = sum(card.value for card in hand.visible_cards)
    if hand.is_concealed:
        return DealerValueView(concealed=True, visible=visible, total=None)
    return DealerValueView(concealed=False, visible=visible, total=hand.value)
