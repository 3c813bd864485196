"""Tests for the dealer's drawing policy."""

import pytest

from blackjack.cards import Card, Deck
from blackjack.errors import EmptyDeckError
from blackjack.game.dealer import DEALER_STAND_THRESHOLD, dealer_should_hit, play_dealer_hand
from conftest import make_hand


def _deck(*codes: str) -> Deck:
    return Deck.from_cards(Card.from_string(code) for code in codes)


class TestDealerShouldHit:
    """Tests for the hit/stand decision."""

    def test_threshold(self):
        assert DEALER_STAND_THRESHOLD == 17

    def test_hits_on_16(self, hard_16_hand):
        assert dealer_should_hit(hard_16_hand)

    def test_stands_on_hard_17(self):
        assert not dealer_should_hit(make_hand("10S", "7H", role="dealer"))

    def test_stands_on_soft_17(self, soft_17_hand):
        """Test the dealer stands on every 17, soft ones included."""
        assert not dealer_should_hit(soft_17_hand)

    def test_stands_when_bust(self, bust_hand):
        assert not dealer_should_hit(bust_hand)


class TestPlayDealerHand:
    """Tests for completing the dealer's hand."""

    def test_draws_until_17(self):
        """Test the dealer keeps drawing below 17."""
        hand = make_hand("6C", "9D", role="dealer")  # 15
        deck = _deck("5S", "KH")

        drawn = play_dealer_hand(hand, deck)

        assert drawn == [Card.from_string("5S")]
        assert hand.value == 20
        assert len(deck) == 1

    def test_draws_several_cards(self):
        hand = make_hand("2C", "3D", role="dealer")  # 5
        deck = _deck("2S", "4H", "3C", "9D")

        drawn = play_dealer_hand(hand, deck)

        assert len(drawn) == 4
        assert hand.value == 23
        assert hand.is_busted

    def test_no_draw_at_17(self):
        """Test the dealer never hits once at 17 or more."""
        hand = make_hand("10C", "7D", role="dealer")
        deck = _deck("4S")

        assert play_dealer_hand(hand, deck) == []
        assert len(deck) == 1

    def test_soft_hand_reduces_ace(self):
        """Test a soft total that busts with 11 keeps drawing as hard."""
        hand = make_hand("AC", "5D", role="dealer")  # soft 16
        deck = _deck("10S", "3H")  # hard 16, then 19

        play_dealer_hand(hand, deck)
        assert hand.value == 19

    def test_on_draw_callback(self):
        hand = make_hand("10C", "2D", role="dealer")
        deck = _deck("3S", "4H")
        seen = []

        play_dealer_hand(hand, deck, on_draw=seen.append)
        assert seen == [Card.from_string("3S"), Card.from_string("4H")]

    def test_empty_deck_raises(self):
        """Test an exhausted deck surfaces as an error."""
        hand = make_hand("2C", "3D", role="dealer")
        with pytest.raises(EmptyDeckError):
            play_dealer_hand(hand, _deck("2S"))
