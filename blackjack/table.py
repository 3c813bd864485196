"""Action surface for the controlling collaborator."""

import logging
from random import Random
from typing import Callable

from blackjack.errors import IllegalActionError
from blackjack.hand import Hand
from blackjack.game.engine import Round
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import RoundState
from blackjack.views import (
    CardView,
    DealerValueView,
    Drawn,
    HandView,
    RoundEnded,
    RoundStarted,
    TableSnapshot,
    dealer_value_view,
    hand_view,
)
from config import GameConfig, config

logger = logging.getLogger(__name__)


class Table:
    """
    One player's seat against the dealer.

    Holds the balance between rounds and the live round. The controller
    calls the action methods; renderers read the view methods, which
    never expose a face-down card.
    """

    def __init__(
        self,
        balance: int | None = None,
        rng: Random | None = None,
        game_config: GameConfig | None = None,
    ) -> None:
        """
        Initialize the table.

        Args:
            balance: Starting balance (defaults to the configured amount)
            rng: Shuffle source shared by every round at this table
            game_config: Table configuration (defaults to global config)

        Raises:
            ValueError: balance is not a whole amount of at least 0
        """
        self.config = game_config or config.game
        if balance is None:
            balance = self.config.initial_balance
        if isinstance(balance, bool) or not isinstance(balance, int) or balance < 0:
            raise ValueError(f"Balance must be a whole amount of at least 0, got {balance!r}")
        self._balance = balance
        self._rng = rng or self.config.make_rng()
        self.events = EventEmitter()
        self.round: Round | None = None
        self.rounds_played = 0

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    @property
    def balance(self) -> int:
        """Current balance, with the live round's bet already taken."""
        if self.round is not None:
            return self.round.balance
        return self._balance

    @property
    def state(self) -> RoundState:
        if self.round is None:
            return RoundState.AWAITING_BET
        return self.round.state

    @property
    def is_bankrupt(self) -> bool:
        return self.balance <= 0 and self.state in (
            RoundState.AWAITING_BET,
            RoundState.RESOLVED,
        )

    def start_round(self, bet: int) -> RoundStarted | RoundEnded:
        """
        Start a new round with a fresh deck.

        A natural resolves immediately and is reported as ``RoundEnded``.

        Raises:
            IllegalActionError: a round is still in progress
            InvalidBetError: bet rejected; balance and previous round unchanged
        """
        if self.state in (RoundState.PLAYER_TURN, RoundState.DEALER_TURN):
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message="Round already in progress",
                action="start_round",
                state=self.state.name,
            )
            raise IllegalActionError("start a round", self.state)

        # History covers the latest round only
        self.events.clear_history()
        new_round = Round(rng=self._rng, events=self.events)
        new_round.start(bet, self.balance)

        self.round = new_round
        self.rounds_played += 1
        logger.debug("Round %d started with bet %d", self.rounds_played, bet)

        if new_round.is_resolved:
            return self._round_ended(new_round)
        return RoundStarted(
            bet=bet,
            balance=self.balance,
            player_hand=self.player_hand_view(),
            dealer_hand=self.dealer_hand_view(),
        )

    def player_hit(self) -> Drawn | RoundEnded:
        """
        Draw a card for the player.

        Raises:
            IllegalActionError: not the player's turn
        """
        live_round = self._require_round("hit")
        card = live_round.hit()
        if live_round.is_resolved:
            return self._round_ended(live_round)
        return Drawn(card=CardView.from_card(card), player_hand=self.player_hand_view())

    def player_stand(self) -> RoundEnded:
        """
        Stand; the dealer plays and the round resolves.

        Raises:
            IllegalActionError: not the player's turn
        """
        live_round = self._require_round("stand")
        live_round.stand()
        return self._round_ended(live_round)

    def _require_round(self, action: str) -> Round:
        if self.round is None:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=f"Cannot {action} before a round starts",
                action=action,
                state=RoundState.AWAITING_BET.name,
            )
            raise IllegalActionError(action, RoundState.AWAITING_BET)
        return self.round

    def _round_ended(self, finished: Round) -> RoundEnded:
        resolution = finished.resolution
        if resolution is None:
            raise IllegalActionError("settle the round", finished.state)
        self._balance = finished.balance

        if self.is_bankrupt:
            self.events.emit_new(EventType.GAME_ENDED, reason="bankrupt")

        return RoundEnded(
            outcome=resolution.outcome,
            bet=resolution.bet,
            payout=resolution.payout,
            net=resolution.net,
            balance=self.balance,
            player_hand=self.player_hand_view(),
            dealer_hand=self.dealer_hand_view(),
        )

    def _hands(self) -> tuple[Hand, Hand]:
        if self.round is None:
            return Hand(role="player"), Hand(role="dealer")
        return self.round.player_hand, self.round.dealer_hand

    def player_hand_view(self) -> HandView:
        """All of the player's cards."""
        return hand_view(self._hands()[0])

    def dealer_hand_view(self) -> HandView:
        """Dealer's cards, the first shown face down during the player's turn."""
        return hand_view(self._hands()[1])

    def player_value(self) -> int:
        return self._hands()[0].value

    def dealer_display_value(self) -> DealerValueView:
        return dealer_value_view(self._hands()[1])

    def snapshot(self) -> TableSnapshot:
        """Read-only picture of the whole table."""
        return TableSnapshot(
            state=self.state.name,
            balance=self.balance,
            bet=self.round.bet if self.round else 0,
            player_hand=self.player_hand_view(),
            dealer_hand=self.dealer_hand_view(),
            player_value=self.player_value(),
            dealer_value=str(self.dealer_display_value()),
            outcome=self.round.outcome if self.round else None,
            can_hit=self.round.can_hit if self.round else False,
            can_stand=self.round.can_stand if self.round else False,
        )
