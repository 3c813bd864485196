"""Round engine with state machine."""

import logging
from random import Random
from typing import NoReturn

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.errors import IllegalActionError, InvalidBetError
from blackjack.hand import Hand
from blackjack.game.dealer import play_dealer_hand
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.resolver import Outcome, Resolution, resolve
from blackjack.game.state import ROUND_TRIGGERS, RoundState

logger = logging.getLogger(__name__)

_OUTCOME_EVENTS = {
    Outcome.BLACKJACK_WIN: EventType.PLAYER_WINS,
    Outcome.PLAYER_WIN: EventType.PLAYER_WINS,
    Outcome.PUSH: EventType.PUSH,
    Outcome.DEALER_WIN: EventType.PLAYER_LOSES,
}


def check_bet(bet: object, balance: int) -> None:
    """
    Validate a bet against the balance available at round start.

    Raises:
        InvalidBetError: bet is not a whole amount in 1..balance
    """
    if balance <= 0:
        raise InvalidBetError(bet, balance, "No balance left to bet")
    if isinstance(bet, bool) or not isinstance(bet, int):
        raise InvalidBetError(bet, balance, f"Bet must be a whole amount, got {bet!r}")
    if bet <= 0:
        raise InvalidBetError(bet, balance, "Bet must be positive")
    if bet > balance:
        raise InvalidBetError(bet, balance, f"Bet {bet} exceeds balance {balance}")


class Round:
    """
    A single round between the player and the dealer.

    Owns its deck and both hands. Every action runs to completion,
    dealer turn included, before returning to the caller.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": trigger, "source": source.name.lower(), "dest": dest.name.lower()}
        for trigger, (source, dest) in ROUND_TRIGGERS.items()
    ]

    def __init__(
        self,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a round awaiting its bet.

        Args:
            rng: Random number generator used to shuffle the round's deck
            events: Channel to notify; a private one is created if omitted
        """
        self._rng = rng or Random()
        self.events = events or EventEmitter()

        self.deck: Deck | None = None
        self.player_hand = Hand(role="player")
        self.dealer_hand = Hand(role="dealer")
        self.bet = 0
        self.balance = 0
        self.was_natural = False
        self.resolution: Resolution | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_bet",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state_change",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def _log_state_change(self) -> None:
        logger.debug("Round moved to %s", self.state)

    def start(self, bet: int, balance: int) -> None:
        """
        Take the bet and deal the opening cards.

        Args:
            bet: Amount staked, 0 < bet <= balance
            balance: Player balance before the bet is taken

        Raises:
            IllegalActionError: round already started
            InvalidBetError: bet rejected; nothing changes
        """
        if self.state != RoundState.AWAITING_BET:
            self._reject("start")

        try:
            check_bet(bet, balance)
        except InvalidBetError as exc:
            event_type = (
                EventType.INSUFFICIENT_FUNDS
                if isinstance(bet, int) and bet > balance
                else EventType.INVALID_ACTION
            )
            self.events.emit_new(event_type, message=str(exc), bet=bet, balance=balance)
            raise

        self.bet = bet
        self.balance = balance - bet
        self.events.emit_new(EventType.BET_PLACED, amount=bet, balance=self.balance)
        logger.debug("Bet %d placed, balance now %d", bet, self.balance)

        self.deck = Deck(rng=self._rng)
        self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=len(self.deck))
        self.player_hand.clear()
        self.dealer_hand.clear()

        # Deal: player, dealer (face down), player, dealer
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand, concealed=True)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)

        self.deal_cards()
        self.events.emit_new(
            EventType.ROUND_STARTED,
            bet=bet,
            player_value=self.player_hand.value,
        )

        if self.player_hand.is_natural:
            # Dealer does not act against a natural
            self.was_natural = True
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self.player_blackjack()
            self._resolve_round()

    def _deal_card_to_hand(self, hand: Hand, concealed: bool = False) -> Card:
        """Deal a card to a hand."""
        card = self._require_deck("deal").draw()
        hand.add_card(card, concealed=concealed)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card="??" if concealed else str(card),
            hand=hand.role,
            hand_value=None if hand.is_concealed else hand.value,
        )
        return card

    def hit(self) -> Card:
        """
        Player takes another card.

        Busting resolves the round at once. Reaching exactly 21 stands
        automatically; below 21 the player may keep hitting.

        Returns:
            The card drawn

        Raises:
            IllegalActionError: not the player's turn
        """
        if self.state != RoundState.PLAYER_TURN:
            self._reject("hit")

        card = self._deal_card_to_hand(self.player_hand)
        value = self.player_hand.value
        self.events.emit_new(EventType.PLAYER_HIT, card=str(card), hand_value=value)

        if self.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=value)
            self.player_busts()
            self._resolve_round()
        elif value == 21:
            self.stand()

        return card

    def stand(self) -> Resolution:
        """
        Player stands; the dealer plays out and the round resolves.

        Raises:
            IllegalActionError: not the player's turn
        """
        if self.state != RoundState.PLAYER_TURN:
            self._reject("stand")

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self.player_done()
        return self._play_dealer()

    def _play_dealer(self) -> Resolution:
        """Dealer reveals and draws to 17."""
        hole_card = self.dealer_hand.reveal()
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(hole_card),
            hand_value=self.dealer_hand.value,
        )

        def on_draw(card: Card) -> None:
            self.events.emit_new(
                EventType.CARD_DEALT,
                card=str(card),
                hand=self.dealer_hand.role,
                hand_value=self.dealer_hand.value,
            )
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        deck = self._require_deck("play the dealer")
        play_dealer_hand(self.dealer_hand, deck, on_draw=on_draw)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

        self.dealer_done()
        return self._resolve_round()

    def _resolve_round(self) -> Resolution:
        """Resolve the round and pay out the bet."""
        self.dealer_hand.reveal()
        resolution = resolve(
            self.player_hand,
            self.dealer_hand,
            self.bet,
            self.was_natural,
        )
        self.resolution = resolution
        self.balance += resolution.payout

        self.events.emit_new(
            _OUTCOME_EVENTS[resolution.outcome],
            outcome=resolution.outcome.value,
            amount=resolution.payout,
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=resolution.outcome.value,
            payout=resolution.payout,
            net=resolution.net,
            balance=self.balance,
        )
        logger.debug(
            "Round resolved: %s, payout %d, balance %d",
            resolution.outcome,
            resolution.payout,
            self.balance,
        )
        return resolution

    def _require_deck(self, action: str) -> Deck:
        if self.deck is None:
            raise IllegalActionError(action, self.state)
        return self.deck

    def _reject(self, action: str) -> NoReturn:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in current state",
            action=action,
            state=self.state.name,
        )
        raise IllegalActionError(action, self.state)

    @property
    def outcome(self) -> Outcome | None:
        return self.resolution.outcome if self.resolution else None

    @property
    def payout(self) -> int | None:
        return self.resolution.payout if self.resolution else None

    @property
    def is_resolved(self) -> bool:
        return self.state == RoundState.RESOLVED

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == RoundState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == RoundState.PLAYER_TURN
