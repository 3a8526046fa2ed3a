import pytest

from deckcheck.models.card import Card
from deckcheck.models.checklist import ChecklistError
from deckcheck.services.card_grouper import SortKey
from deckcheck.services.card_resolver import CardResolver
from deckcheck.services.deck_pipeline import build_deck_view
from deckcheck.services.deck_session import DeckSession


class TestBuildDeckView:
    def test_full_pipeline(self, resolver: CardResolver, sample_deck_text: str) -> None:
        view = build_deck_view(sample_deck_text, resolver, SortKey.SET)

        assert len(view.cards) == 9
        assert [c.name for c in view.unfound] == ["Totally Made Up Card"]
        assert view.grouping.sort_key is SortKey.SET
        assert view.checklist.incomplete_count == view.checklist.total_flag_count

    def test_same_inputs_same_view(self, resolver: CardResolver, sample_deck_text: str) -> None:
        first = build_deck_view(sample_deck_text, resolver, SortKey.COLOR)
        second = build_deck_view(sample_deck_text, resolver, SortKey.COLOR)

        assert first.cards == second.cards
        assert first.grouping == second.grouping
        assert dict(first.checklist.flags) == dict(second.checklist.flags)

    def test_empty_deck(self, resolver: CardResolver) -> None:
        view = build_deck_view("", resolver, SortKey.SET)

        assert view.cards == []
        assert view.grouping.ordered_keys == []
        assert view.checklist.unique_card_count == 0


class TestDeckSession:
    @pytest.fixture
    def deck(self, sample_cards: list[Card], sample_deck_text: str) -> DeckSession:
        return DeckSession(deck_text=sample_deck_text, cards=sample_cards)

    def test_initial_state(self, deck: DeckSession) -> None:
        assert deck.sort_key is SortKey.SET
        assert deck.index_size == 7
        assert deck.checklist.is_built
        assert deck.checklist.incomplete_count() == 21

    def test_deck_text_change_resets_progress(self, deck: DeckSession) -> None:
        deck.toggle("Lightning Bolt", 0)
        deck.toggle("Sol Ring", 0)
        assert deck.checklist.incomplete_count() == 19

        deck.set_deck_text("4 Lightning Bolt\n1 Sol Ring")

        assert deck.checklist.flags("Lightning Bolt") == (False,) * 4
        assert deck.checklist.flags("Sol Ring") == (False,)
        assert deck.checklist.incomplete_count() == 5

    def test_same_text_still_rebuilds(self, deck: DeckSession) -> None:
        deck.toggle("Sol Ring", 0)

        deck.set_deck_text(deck.deck_text)

        assert deck.checklist.flags("Sol Ring") == (False,)

    def test_sort_change_keeps_progress(self, deck: DeckSession) -> None:
        deck.toggle("Sol Ring", 0)

        deck.set_sort_key(SortKey.TYPE)

        assert deck.sort_key is SortKey.TYPE
        assert deck.grouping.ordered_keys[0] == "Artifact"
        assert deck.checklist.flags("Sol Ring") == (True,)
        assert deck.is_group_complete("Artifact") is True

    def test_card_index_change_resets_progress(
        self, deck: DeckSession, sample_cards: list[Card]
    ) -> None:
        deck.toggle("Sol Ring", 0)

        deck.set_card_index([c for c in sample_cards if c.name != "Sol Ring"])

        assert deck.checklist.flags("Sol Ring") == (False,)
        assert "Sol Ring" in [c.name for c in deck.unfound]

    def test_group_completion_follows_toggles(self, deck: DeckSession) -> None:
        for index in range(4):
            deck.toggle("Lightning Bolt", index)

        # Every Bolt printing shares the one flag array
        assert deck.is_group_complete("Magic 2010") is True
        assert deck.is_group_complete("Magic 2011") is True
        assert deck.is_group_complete("Double Masters") is True

        deck.toggle("Lightning Bolt", 2)
        assert deck.is_group_complete("Magic 2011") is False

    def test_ordered_cards(self, sample_cards: list[Card]) -> None:
        deck = DeckSession(
            deck_text="1 Sol Ring\n4 Lightning Bolt\n2 Counterspell",
            cards=sample_cards,
            sort_key=SortKey.TYPE,
        )

        assert [c.name for c in deck.ordered_cards("Instant")] == [
            "Lightning Bolt",
            "Counterspell",
        ]

    def test_invalid_toggle_raises(self, deck: DeckSession) -> None:
        with pytest.raises(ChecklistError):
            deck.toggle("Lightning Bolt", 4)

        assert deck.checklist.incomplete_count() == 21
