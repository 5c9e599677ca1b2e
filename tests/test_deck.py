"""Unit tests for the deck."""

import random
from collections import Counter

import pytest

from duocardgame.engine import (
    ActionCard,
    ActionType,
    Color,
    Deck,
    DeckExhausted,
    NumberCard,
    Player,
    STANDARD_DECK_SIZE,
    create_cards,
)


def test_create_deck_size() -> None:
    deck = Deck(rng=random.Random(42))
    assert len(deck) == STANDARD_DECK_SIZE == 109
    assert len(deck.draw_pile) == 109
    assert deck.discard_pile == []


def test_deck_composition() -> None:
    cards = create_cards()
    numbers = Counter((c.color, c.number) for c in cards if isinstance(c, NumberCard))
    actions = Counter((c.color, c.action) for c in cards if isinstance(c, ActionCard))
    for color in Color.playable():
        assert numbers[(color, 0)] == 1
        for n in range(1, 10):
            assert numbers[(color, n)] == 2
        for action in (ActionType.DRAW_TWO, ActionType.REVERSE, ActionType.SKIP):
            assert actions[(color, action)] == 2
    assert actions[(Color.WILD, ActionType.WILD)] == 4
    assert actions[(Color.WILD, ActionType.WILD_DRAW_FOUR)] == 4
    assert actions[(Color.WILD, ActionType.SHUFFLE_HANDS)] == 1


def test_create_deck_reproducible() -> None:
    d1 = Deck(rng=random.Random(123))
    d2 = Deck(rng=random.Random(123))
    assert [str(c) for c in d1.draw_pile] == [str(c) for c in d2.draw_pile]


def test_draw_from_front() -> None:
    first, second = NumberCard(Color.RED, 1), NumberCard(Color.RED, 2)
    deck = Deck(cards=[first, second])
    assert deck.draw_card() is first
    assert deck.draw_pile == [second]


def test_reshuffle_keeps_top_discard() -> None:
    discard = [NumberCard(Color.BLUE, n) for n in range(1, 6)]
    top = discard[-1]
    deck = Deck(rng=random.Random(1), cards=[])
    deck.discard_pile = list(discard)

    deck.reshuffle()

    assert len(deck.draw_pile) == 4
    assert deck.discard_pile == [top]
    assert deck.discard_pile[0] is top
    assert {id(c) for c in deck.draw_pile} == {id(c) for c in discard[:-1]}


def test_draw_on_empty_pile_reshuffles() -> None:
    discard = [NumberCard(Color.BLUE, n) for n in range(1, 6)]
    deck = Deck(rng=random.Random(1), cards=[])
    deck.discard_pile = list(discard)

    drawn = deck.draw_card()

    assert drawn in discard[:-1]
    assert len(deck.draw_pile) == 3
    assert deck.get_top_discard_pile_card() is discard[-1]


def test_reshuffle_noop_with_single_discard() -> None:
    top = NumberCard(Color.RED, 9)
    deck = Deck(cards=[])
    deck.put_card_to_discard_pile(top)
    deck.reshuffle()
    assert deck.draw_pile == []
    assert deck.discard_pile == [top]


def test_draw_exhausted_raises() -> None:
    deck = Deck(cards=[])
    deck.put_card_to_discard_pile(NumberCard(Color.RED, 9))
    with pytest.raises(DeckExhausted):
        deck.draw_card()


def test_deal_cards_round_robin() -> None:
    cards = [NumberCard(Color.GREEN, n) for n in range(1, 7)]
    deck = Deck(cards=cards)
    players = [Player("p1"), Player("p2"), Player("p3")]

    deck.deal_cards(players, 2)

    assert players[0].hand == [cards[0], cards[3]]
    assert players[1].hand == [cards[1], cards[4]]
    assert players[2].hand == [cards[2], cards[5]]
    assert deck.draw_pile == []


def test_deal_cards_reshuffles_when_needed() -> None:
    deck = Deck(rng=random.Random(2), cards=[NumberCard(Color.RED, 1)])
    deck.discard_pile = [NumberCard(Color.RED, n) for n in range(2, 6)]
    players = [Player("p1"), Player("p2")]

    deck.deal_cards(players, 2)

    assert sum(len(p.hand) for p in players) == 4
    assert len(deck) == 1


def test_top_discard_empty() -> None:
    assert Deck(cards=[]).get_top_discard_pile_card() is None


def test_copy_is_deep() -> None:
    deck = Deck(rng=random.Random(5))
    deck.put_card_to_discard_pile(deck.draw_card())
    clone = deck.copy()

    assert [str(c) for c in clone.draw_pile] == [str(c) for c in deck.draw_pile]
    assert [str(c) for c in clone.discard_pile] == [str(c) for c in deck.discard_pile]
    assert not {id(c) for c in clone.draw_pile} & {id(c) for c in deck.draw_pile}

    clone.draw_card()
    assert len(clone) == len(deck) - 1


def test_add_card_to_draw_pile_goes_to_bottom() -> None:
    deck = Deck(cards=[NumberCard(Color.RED, 1)])
    card = NumberCard(Color.RED, 2)
    deck.add_card_to_draw_pile(card)
    assert deck.draw_pile[-1] is card
