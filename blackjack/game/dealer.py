"""Fixed-threshold dealer policy."""

from typing import Callable

from blackjack.cards import Card, Deck
from blackjack.hand import Hand

DEALER_STAND_THRESHOLD = 17


def dealer_should_hit(hand: Hand) -> bool:
    """Dealer draws below 17 and stands on every 17, soft or hard."""
    return hand.value < DEALER_STAND_THRESHOLD


def play_dealer_hand(
    hand: Hand,
    deck: Deck,
    on_draw: Callable[[Card], None] | None = None,
) -> list[Card]:
    """
    Draw into the dealer's hand until the policy says stand.

    Args:
        hand: Dealer hand, completed in place
        deck: Deck to draw from
        on_draw: Called with each card after it joins the hand

    Returns:
        The cards drawn, in order
    """
    drawn: list[Card] = []
    while dealer_should_hit(hand):
        card = deck.draw()
        hand.add_card(card)
        drawn.append(card)
        if on_draw is not None:
            on_draw(card)
    return drawn
