"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator, Literal

from blackjack.cards import Card

Role = Literal["player", "dealer"]


@dataclass
class Hand:
    """
    Cards held by one participant.

    The dealer's first card may be flagged as concealed. The card stays in
    ``cards`` so that scoring always sees it; only public views hide it.
    """

    role: Role = "player"
    cards: list[Card] = field(default_factory=list)
    concealed_index: int | None = None

    def add_card(self, card: Card, concealed: bool = False) -> None:
        """Add a card to the hand, optionally face down."""
        if concealed:
            if self.concealed_index is not None:
                raise ValueError("Hand already holds a concealed card")
            self.concealed_index = len(self.cards)
        self.cards.append(card)

    def reveal(self) -> Card | None:
        """Turn the concealed card face up and return it."""
        card = self.concealed_card
        self.concealed_index = None
        return card

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()
        self.concealed_index = None

    @property
    def value(self) -> int:
        """
        Calculate the best hand value.

        Returns the highest value that doesn't bust, or the lowest bust value.
        """
        total = 0
        aces = 0

        for card in self.cards:
            total += card.value
            if card.is_ace:
                aces += 1

        # Reduce aces from 11 to 1 as needed
        while total > 21 and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def is_soft(self) -> bool:
        """Check if an ace is still counted as 11."""
        if not any(card.is_ace for card in self.cards):
            return False
        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= 21

    @property
    def is_natural(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == 21

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > 21

    @property
    def is_concealed(self) -> bool:
        return self.concealed_index is not None

    @property
    def concealed_card(self) -> Card | None:
        if self.concealed_index is None:
            return None
        return self.cards[self.concealed_index]

    @property
    def visible_cards(self) -> list[Card]:
        """Cards an outside viewer may see."""
        return [
            card for i, card in enumerate(self.cards) if i != self.concealed_index
        ]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(
            "??" if i == self.concealed_index else str(card)
            for i, card in enumerate(self.cards)
        )
        if self.is_concealed:
            return cards_str
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_natural:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.role!r}, {self.cards!r}, value={self.value})"
