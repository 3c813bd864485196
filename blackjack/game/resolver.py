"""Outcome resolution and payouts."""

from enum import Enum
from typing import NamedTuple

from blackjack.hand import Hand


class Outcome(Enum):
    """How a round ended for the player."""

    BLACKJACK_WIN = "blackjack"
    PLAYER_WIN = "win"
    PUSH = "push"
    DEALER_WIN = "lose"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Resolution(NamedTuple):
    """Result of comparing the final hands."""

    outcome: Outcome
    payout: int
    bet: int

    @property
    def net(self) -> int:
        """Gain relative to the balance before the bet was taken."""
        return self.payout - self.bet


def blackjack_payout(bet: int) -> int:
    """Stake back, plus the bet, plus a half-bet bonus (rounded down)."""
    return bet * 2 + bet // 2


def resolve(
    player_hand: Hand,
    dealer_hand: Hand,
    bet: int,
    was_natural: bool,
) -> Resolution:
    """
    Compare final hands and compute the amount credited back to the balance.

    The bet has already been taken from the balance, so a loss pays 0,
    a push pays the bet and a win pays twice the bet.

    Args:
        player_hand: The player's final hand
        dealer_hand: The dealer's final hand
        bet: Amount staked for the round
        was_natural: Player was dealt a two-card 21

    Returns:
        Outcome and payout
    """
    if was_natural:
        return Resolution(Outcome.BLACKJACK_WIN, blackjack_payout(bet), bet)

    # Player busts always loses, whatever the dealer holds
    if player_hand.is_busted:
        return Resolution(Outcome.DEALER_WIN, 0, bet)

    if dealer_hand.is_busted:
        return Resolution(Outcome.PLAYER_WIN, bet * 2, bet)

    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_value > dealer_value:
        return Resolution(Outcome.PLAYER_WIN, bet * 2, bet)
    if player_value == dealer_value:
        return Resolution(Outcome.PUSH, bet, bet)
    return Resolution(Outcome.DEALER_WIN, 0, bet)
