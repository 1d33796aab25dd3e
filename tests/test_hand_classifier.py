"""Tests for five-card hand classification.

Test coverage:
- One concrete hand per category, including the Ace-low "wheel"
- Totality over inputs with repeated cards
- Rule predicates are mutually exclusive for real hands
- Result does not depend on input order
"""

import random

import pytest

from poker_hands.domain.enums import DeckKind, HandCategory, Rank, Suit
from poker_hands.domain.models import Card, Deck
from poker_hands.domain.services.hand_classifier import HandClassifier, HandFeatures


def classify(text):
    return HandClassifier.classify(Card.list_from_string(text))


STANDARD_CARDS = Deck.create(DeckKind.STANDARD).cards


class TestScenarios:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("A♦ K♦ Q♦ J♦ 10♦", HandCategory.ROYAL_FLUSH),
            ("6♦ 7♦ 8♦ 9♦ 10♦", HandCategory.STRAIGHT_FLUSH),
            ("9♦ K♦ Q♦ J♦ 10♦", HandCategory.STRAIGHT_FLUSH),
            ("A♥ A♦ A♠ A♣ 3♦", HandCategory.FOUR_OF_A_KIND),
            ("2♥ 2♦ 2♠ A♣ A♦", HandCategory.FULL_HOUSE),
            ("K♥ 4♥ 2♥ A♥ 7♥", HandCategory.FLUSH),
            ("K♠ Q♥ J♥ 10♦ 9♥", HandCategory.STRAIGHT),
            ("K♥ K♦ K♠ A♣ 3♦", HandCategory.THREE_OF_A_KIND),
            ("2♥ 2♦ K♠ K♣ 3♦", HandCategory.TWO_PAIR),
            ("2♥ 2♦ K♠ A♣ 3♦", HandCategory.PAIR),
            ("2♥ 7♦ K♠ A♣ 5♦", HandCategory.HIGH_CARD),
        ],
    )
    def test_category(self, text, expected):
        assert classify(text) == expected

    def test_wheel_is_not_a_straight(self):
        assert classify("A♥ 2♦ 3♠ 4♣ 5♦") == HandCategory.HIGH_CARD

    def test_suited_wheel_is_only_a_flush(self):
        assert classify("A♣ 2♣ 3♣ 4♣ 5♣") == HandCategory.FLUSH

    def test_ace_does_not_wrap_around(self):
        assert classify("Q♥ K♦ A♠ 2♣ 3♦") == HandCategory.HIGH_CARD

    def test_royal_ranks_without_flush_is_straight(self):
        assert classify("A♦ K♣ Q♦ J♦ 10♦") == HandCategory.STRAIGHT


class TestFeatures:
    def test_histograms_cover_every_rank_and_suit(self):
        features = HandFeatures.from_cards(Card.list_from_string("2♥ 2♦ K♠ K♣ 3♦"))
        assert set(features.rank_counts) == set(Rank)
        assert set(features.suit_counts) == set(Suit)
        assert features.rank_counts[Rank.TWO] == 2
        assert features.rank_counts[Rank.KING] == 2
        assert features.rank_counts[Rank.ACE] == 0
        assert features.suit_counts[Suit.DIAMONDS] == 2
        assert features.pairs == 2

    def test_full_house_counts_one_pair(self):
        features = HandFeatures.from_cards(Card.list_from_string("2♥ 2♦ 2♠ A♣ A♦"))
        assert features.pairs == 2
        assert features.pair_ranks == 1
        assert features.has_three

    def test_sequence_rejects_duplicates(self):
        features = HandFeatures.from_cards(Card.list_from_string("9♥ 9♦ 10♠ J♣ Q♦"))
        assert not features.in_sequence

    def test_sequence_and_flush(self):
        features = HandFeatures.from_cards(Card.list_from_string("2♠ 3♠ 4♠ 5♠ 6♠"))
        assert features.in_sequence
        assert features.is_flush


class TestProperties:
    def test_total_over_repeated_cards(self):
        rng = random.Random(7)
        for _ in range(2000):
            cards = rng.choices(STANDARD_CARDS, k=5)
            assert HandClassifier.classify(cards) in HandCategory

    def test_five_identical_cards_still_classify(self):
        cards = [Card(Rank.ACE, Suit.HEARTS)] * 5
        assert HandClassifier.classify(cards) in HandCategory

    def test_rules_are_mutually_exclusive(self):
        rng = random.Random(11)
        for _ in range(5000):
            cards = rng.sample(STANDARD_CARDS, 5)
            matched = HandClassifier.matching_categories(cards)
            assert len(matched) == 1, (cards, matched)
            assert matched[0] == HandClassifier.classify(cards)

    @pytest.mark.parametrize(
        "text",
        [
            "A♦ K♦ Q♦ J♦ 10♦",
            "6♦ 7♦ 8♦ 9♦ 10♦",
            "A♥ A♦ A♠ A♣ 3♦",
            "2♥ 2♦ 2♠ A♣ A♦",
            "K♥ 4♥ 2♥ A♥ 7♥",
            "K♠ Q♥ J♥ 10♦ 9♥",
            "K♥ K♦ K♠ A♣ 3♦",
            "2♥ 2♦ K♠ K♣ 3♦",
            "2♥ 2♦ K♠ A♣ 3♦",
        ],
    )
    def test_each_category_matches_exactly_one_rule(self, text):
        assert len(HandClassifier.matching_categories(Card.list_from_string(text))) == 1

    def test_order_independent(self):
        rng = random.Random(3)
        for _ in range(500):
            cards = rng.sample(STANDARD_CARDS, 5)
            expected = HandClassifier.classify(cards)
            for _ in range(5):
                shuffled = cards[:]
                rng.shuffle(shuffled)
                assert HandClassifier.classify(shuffled) == expected

    def test_classify_does_not_mutate_input(self):
        cards = Card.list_from_string("2♥ 7♦ K♠ A♣ 5♦")
        before = list(cards)
        HandClassifier.classify(cards)
        assert cards == before


class TestRulePredicates:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("A♥ A♦ A♠ A♣ 3♦", HandCategory.FOUR_OF_A_KIND),
            ("2♥ 2♦ 2♠ A♣ A♦", HandCategory.FULL_HOUSE),
            ("10♣ 10♥ 10♠ 6♥ 6♠", HandCategory.FULL_HOUSE),
        ],
    )
    def test_two_pair_rule_skips_trips_and_quads(self, text, expected):
        assert HandClassifier.matching_categories(Card.list_from_string(text)) == [expected]

    def test_two_pair_rule_matches_two_pair(self):
        cards = Card.list_from_string("2♥ 2♦ K♠ K♣ 3♦")
        assert HandClassifier.matching_categories(cards) == [HandCategory.TWO_PAIR]

    def test_five_of_a_rank_is_still_two_pair(self):
        cards = [Card(Rank.ACE, suit) for suit in (Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS, Suit.SPADES, Suit.HEARTS)]
        assert HandClassifier.classify(cards) == HandCategory.TWO_PAIR

    def test_features_are_hashable(self):
        features = HandFeatures.from_cards(Card.list_from_string("2♥ 2♦ K♠ K♣ 3♦"))
        assert {features: "two pair"}[features] == "two pair"
