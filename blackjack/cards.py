"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

from blackjack.errors import EmptyDeckError


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def letter(self) -> str:
        """Single-letter code (C, D, H, S)."""
        return self.name[0]


class Rank(Enum):
    """Card ranks, ordered Ace first as in a fresh pack."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the base point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.value <= 10:
            return self.value
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


_RANK_CODES = {str(rank): rank for rank in Rank}
_RANK_CODES["T"] = Rank.TEN

_SUIT_CODES = {suit.letter: suit for suit in Suit}
_SUIT_CODES.update({str(suit): suit for suit in Suit})


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the base point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def code(self) -> str:
        """Short identity such as ``A-H`` or ``10-S``."""
        return f"{self.rank}-{self.suit.letter}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh' or '10-D'."""
        s = s.strip().upper().replace("-", "")
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_CODES[rank_str], _SUIT_CODES[suit_str])


def full_pack() -> list[Card]:
    """All 52 cards in canonical order (suit-major, rank-minor)."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """A single 52-card deck, dealt from the front."""

    def __init__(self, rng: Random | None = None, shuffle: bool = True) -> None:
        """
        Initialize a new deck.

        Args:
            rng: Random number generator used for shuffling
            shuffle: Shuffle immediately after building the canonical order
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()
        if shuffle:
            self.shuffle()

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Deck":
        """Build an unshuffled deck holding exactly the given cards."""
        deck = cls(shuffle=False)
        deck._cards = list(cards)
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = full_pack()

    def shuffle(self) -> None:
        """Uniformly permute the remaining cards."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Remove and return the first card."""
        if not self._cards:
            raise EmptyDeckError()
        return self._cards.pop(0)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
