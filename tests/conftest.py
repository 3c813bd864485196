"""Pytest fixtures for round engine tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.game import Round
from blackjack.table import Table


class StackedRandom(Random):
    """Shuffle source that puts chosen cards on top, in order."""

    top: list[Card] = []

    def shuffle(self, x) -> None:  # type: ignore[override]
        rest = [card for card in x if card not in self.top]
        x[:] = self.top + rest


def stacked_rng(*codes: str) -> StackedRandom:
    """
    Build a shuffle source that deals the given cards first.

    Deal order is player, dealer (face down), player, dealer, then hits.
    """
    rng = StackedRandom()
    rng.top = [Card.from_string(code) for code in codes]
    return rng


def make_hand(*codes: str, role: str = "player") -> Hand:
    """Build a hand from card codes like 'AS', '10H'."""
    hand = Hand(role=role)  # type: ignore[arg-type]
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def game_round(rng):
    """A round awaiting its bet."""
    return Round(rng=rng)


@pytest.fixture
def table(rng):
    """A table with the usual starting balance."""
    return Table(balance=1000, rng=rng)


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=1, max_cards=8):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    return hand
