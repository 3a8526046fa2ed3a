from deckcheck.models.card import ParsedLine
from deckcheck.services.card_grouper import SortKey, group_cards, unfound_cards
from deckcheck.services.card_resolver import CardResolver


class TestGroupBySet:
    def test_reprints_land_in_each_set_bucket(self, resolver: CardResolver) -> None:
        cards = resolver.resolve(ParsedLine(amount=2, raw_name="Lightning Bolt"))

        grouping = group_cards(cards, SortKey.SET)

        assert grouping.ordered_keys == ["Double Masters", "Magic 2010", "Magic 2011"]
        for key in grouping.ordered_keys:
            assert len(grouping[key]) == 1
            assert grouping[key][0].amount == 2

    def test_set_grouping_keeps_duplicate_names(
        self, resolver: CardResolver, sample_deck_text: str
    ) -> None:
        """Counterspell appears on two lines; Set grouping keeps both rows."""
        grouping = group_cards(resolver.resolve_deck(sample_deck_text), SortKey.SET)

        assert [c.amount for c in grouping["Limited Edition Alpha"]] == [2, 2]

    def test_sentinel_buckets(self, resolver: CardResolver, sample_deck_text: str) -> None:
        grouping = group_cards(resolver.resolve_deck(sample_deck_text), SortKey.SET)

        assert [c.name for c in grouping["Basic Lands"]] == ["Mountain"]
        assert [c.name for c in grouping["Unfound"]] == ["Totally Made Up Card"]


class TestGroupByCardTraits:
    def test_reprints_collapse_to_one_row(self, resolver: CardResolver) -> None:
        cards = resolver.resolve(ParsedLine(amount=2, raw_name="Lightning Bolt"))

        for sort_key in (SortKey.COLOR, SortKey.RARITY, SortKey.TYPE):
            grouping = group_cards(cards, sort_key)
            rows = [c for key in grouping.ordered_keys for c in grouping[key]]
            assert len(rows) == 1
            assert rows[0].id == "bolt-m10"

    def test_color_keys(self, resolver: CardResolver, sample_deck_text: str) -> None:
        grouping = group_cards(resolver.resolve_deck(sample_deck_text), SortKey.COLOR)

        assert grouping.ordered_keys == ["Colorless", "R", "U", "UBR"]
        assert [c.name for c in grouping["Colorless"]] == [
            "Sol Ring",
            "Mountain",
            "Totally Made Up Card",
        ]

    def test_rarity_keys_verbatim(self, resolver: CardResolver, sample_deck_text: str) -> None:
        grouping = group_cards(resolver.resolve_deck(sample_deck_text), SortKey.RARITY)

        assert grouping.ordered_keys == ["Unfound", "basicland", "common", "mythic", "uncommon"]
        assert [c.name for c in grouping["uncommon"]] == ["Sol Ring", "Counterspell"]

    def test_type_keys(self, resolver: CardResolver, sample_deck_text: str) -> None:
        grouping = group_cards(resolver.resolve_deck(sample_deck_text), SortKey.TYPE)

        assert grouping.ordered_keys == [
            "Artifact",
            "Basic Land",
            "Instant",
            "Legendary Creature",
            "Unfound",
        ]
        assert [c.name for c in grouping["Instant"]] == ["Lightning Bolt", "Counterspell"]


class TestGroupingShape:
    def test_empty_input(self) -> None:
        grouping = group_cards([], SortKey.SET)

        assert grouping.groups == {}
        assert grouping.ordered_keys == []

    def test_sort_key_from_string(self) -> None:
        assert SortKey("Rarity") is SortKey.RARITY

    def test_membership(self, resolver: CardResolver) -> None:
        grouping = group_cards(resolver.resolve_deck("1 Sol Ring"), SortKey.SET)

        assert "Commander" in grouping
        assert "Alpha" not in grouping


class TestUnfoundCards:
    def test_selects_only_unfound(self, resolver: CardResolver, sample_deck_text: str) -> None:
        result = unfound_cards(resolver.resolve_deck(sample_deck_text))

        assert [c.name for c in result] == ["Totally Made Up Card"]

    def test_nothing_unfound(self, resolver: CardResolver) -> None:
        assert unfound_cards(resolver.resolve_deck("4 Lightning Bolt\n2 Island")) == []
