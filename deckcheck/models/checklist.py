"""
Checklist snapshot: per-card acquisition flags.

A Checklist is an immutable value. Building one from a resolved card list
allocates one all-false flag tuple per distinct card name; toggling a flag
returns a new Checklist and leaves the original untouched, so views taken
before a rebuild never observe later state.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from deckcheck.models.card import DeckCard
from deckcheck.models.failure import FailureKind, KnownError


class ChecklistError(KnownError):
    """Raised when a checklist operation names a card, flag or group that does not exist."""


def _unknown_card(name: str) -> ChecklistError:
    return ChecklistError(
        kind=FailureKind.NOT_FOUND,
        message=f"'{name}' is not on the checklist",
        suggestion="Rebuild the deck view and use a card name from it.",
        status_code=404,
    )


@dataclass(frozen=True)
class Checklist:
    """
    Acquisition flags keyed by card name.

    Attributes:
        flags: Card name -> one flag per requested copy (True = acquired)
        incomplete_count: Number of flags still False across all cards
    """

    flags: Mapping[str, tuple[bool, ...]] = field(default_factory=dict)
    incomplete_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))
        incomplete = sum(1 for flags in self.flags.values() for flag in flags if not flag)
        object.__setattr__(self, "incomplete_count", incomplete)

    @classmethod
    def build(cls, cards: Iterable[DeckCard]) -> "Checklist":
        """
        Build a fresh checklist from a resolved card list.

        One entry per distinct name; the first amount seen for a name wins.
        Every flag starts False.
        """
        flags: dict[str, tuple[bool, ...]] = {}
        for card in cards:
            if card.name not in flags:
                flags[card.name] = (False,) * card.amount
        return cls(flags)

    @property
    def unique_card_count(self) -> int:
        """Number of distinct card names."""
        return len(self.flags)

    @property
    def total_flag_count(self) -> int:
        return sum(len(flags) for flags in self.flags.values())

    def __contains__(self, name: object) -> bool:
        return name in self.flags

    def get(self, name: str) -> tuple[bool, ...]:
        """Flags for a card. Raises ChecklistError if the name is unknown."""
        try:
            return self.flags[name]
        except KeyError:
            raise _unknown_card(name) from None

    def is_card_complete(self, name: str) -> bool:
        """True if every copy of the card is acquired. Unknown names are incomplete."""
        flags = self.flags.get(name)
        if flags is None:
            return False
        return all(flags)

    def toggle(self, name: str, index: int) -> "Checklist":
        """
        Return a new checklist with one flag flipped.

        Raises:
            ChecklistError: If the name is unknown or index is out of range.
                The current checklist is unchanged either way.
        """
        flags = self.get(name)
        if not 0 <= index < len(flags):
            raise ChecklistError(
                kind=FailureKind.INVALID_INPUT,
                message=f"Copy {index} is out of range for '{name}'",
                detail=f"'{name}' has {len(flags)} copies (valid indexes 0-{len(flags) - 1})",
                status_code=400,
            )

        updated = dict(self.flags)
        updated[name] = flags[:index] + (not flags[index],) + flags[index + 1 :]
        return Checklist(updated)
