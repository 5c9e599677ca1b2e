"""Turn, round and game state machine."""

from __future__ import annotations

import logging
import random
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Deque, List, Optional, Sequence, Tuple

from duocardgame.engine.card import ActionCard, Card, Color
from duocardgame.engine.deck import STANDARD_DECK_SIZE, Deck
from duocardgame.engine.errors import DeckExhausted
from duocardgame.engine.player import Player
from duocardgame.engine.snapshot import RoundSnapshot

if TYPE_CHECKING:
    from duocardgame.agent.protocol import Strategy
    from duocardgame.engine.snapshot import SnapshotSink

logger = logging.getLogger(__name__)

WIN_SCORE = 500
HAND_SIZE = 7
MAX_TURNS_PER_ROUND = 10_000
HISTORY_LIMIT = 200


class GamePhase(str, Enum):
    NOT_STARTED = "not_started"
    IN_ROUND = "in_round"
    ROUND_ENDED = "round_ended"
    GAME_OVER = "game_over"


class DuoCardGame:
    """Mediator that owns the players, the deck and all turn state.

    Card effects reach shared state only through the methods of
    :class:`~duocardgame.engine.mediator.GameMediator`, which this class
    implements. A game goes ``start_game()`` then ``play_round()`` until
    ``game_over`` is set.

    Args:
        player_names: Seat names in turn order. When omitted, ``num_players``
            seats (or a random count between ``min_players`` and
            ``max_players``) named ``Player 1``.. are created.
        seed: Seed for the game's random source, ignored when ``rng`` is given.
        rng: Random source shared by the deck, the players and the mediator.
        strategy: Decision policy for created players (default: heuristic).
        sink: Receives a :class:`RoundSnapshot` after every round.
    """

    def __init__(
        self,
        player_names: Optional[Sequence[str]] = None,
        *,
        num_players: Optional[int] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        strategy: Optional["Strategy"] = None,
        sink: Optional["SnapshotSink"] = None,
        win_score: int = WIN_SCORE,
        hand_size: int = HAND_SIZE,
        min_players: int = 2,
        max_players: int = 4,
        max_turns_per_round: int = MAX_TURNS_PER_ROUND,
    ):
        if hand_size < 1:
            raise ValueError(f"Hand size must be at least 1, got {hand_size}")
        self._rng = rng if rng is not None else random.Random(seed)
        self._player_names = list(player_names) if player_names is not None else None
        self._num_players = num_players
        self._strategy = strategy
        self._sink = sink
        self.win_score = win_score
        self.hand_size = hand_size
        self.min_players = min_players
        self.max_players = max_players
        self.max_turns_per_round = max_turns_per_round

        self.players: List[Player] = []
        self._deck = Deck(rng=self._rng)
        self.current_player_index = 0
        self.direction = 1
        self.current_color: Optional[Color] = None
        self.round_number = 1
        self.round_ended = False
        self.game_over = False
        self.winner: Optional[Player] = None
        self.phase = GamePhase.NOT_STARTED
        self.history: Deque[str] = deque(maxlen=HISTORY_LIMIT)

    # -- setup -------------------------------------------------------------

    def _create_players(self) -> List[Player]:
        if self._player_names is not None:
            names = self._player_names
        else:
            count = self._num_players
            if count is None:
                count = self._rng.randint(self.min_players, self.max_players)
            names = [f"Player {i}" for i in range(1, count + 1)]
        if not self.min_players <= len(names) <= self.max_players:
            raise ValueError(
                f"Need between {self.min_players} and {self.max_players} players, got {len(names)}"
            )
        if len(set(names)) != len(names):
            raise ValueError(f"Player names must be unique: {names}")
        if self.hand_size * len(names) + 1 > STANDARD_DECK_SIZE:
            raise ValueError(
                f"Cannot deal {self.hand_size} cards to {len(names)} players from a "
                f"{STANDARD_DECK_SIZE}-card deck"
            )
        logger.info("Starting game with %d players", len(names))
        return [Player(name, strategy=self._strategy, rng=self._rng) for name in names]

    def start_game(self) -> None:
        """Set up a round: dealer, deal, starting discard.

        Players are created only on the first call. The dealer counts as
        having played the starting card, so an action card there takes effect
        with the dealer as actor before the seat after the dealer begins.
        """
        if not self.players:
            self.players = self._create_players()

        self.round_ended = False
        self.direction = 1
        dealer = self.select_dealer()
        self.record_event(f"{dealer.name} deals")

        self._deck.shuffle()
        self._deck.deal_cards(self.players, self.hand_size)
        for player in self.players:
            logger.debug("%s", player)

        self.current_player_index = self._seat_of(dealer)
        starting = self._deck.draw_card()
        self._deck.put_card_to_discard_pile(starting)
        self.current_color = starting.color
        self.phase = GamePhase.IN_ROUND
        self.record_event(f"starting card is {starting}")

        if isinstance(starting, ActionCard):
            starting.execute_effect(self)
        self.move_to_next_player()

    def select_dealer(self) -> Player:
        """Each player draws a card; the strictly highest score deals.

        Ties go to the earlier seat. The drawn cards go back into the draw
        pile, which is then shuffled.
        """
        selected: Optional[Player] = None
        highest = -1
        for player in self.players:
            drawn = self._deck.draw_card()
            logger.debug("%s draws %s for dealer selection", player.name, drawn)
            if drawn.score > highest:
                highest = drawn.score
                selected = player
            self._deck.add_card_to_draw_pile(drawn)
        self._deck.shuffle()
        if selected is None:
            raise ValueError("No players seated")
        return selected

    def reset_round(self) -> None:
        """Fresh deck, empty hands, and a new deal."""
        self._deck = Deck(rng=self._rng)
        for player in self.players:
            player.clear_hand()
        self.start_game()

    # -- round loop --------------------------------------------------------

    def play_round(self) -> Optional[RoundSnapshot]:
        """Play turns until someone empties their hand, then settle the round.

        Returns the round's snapshot, or None if the game is already over.
        A round in which the deck runs dry, or which exceeds
        ``max_turns_per_round``, ends with no winner and no score change.
        """
        if self.game_over:
            logger.warning("play_round() called after the game ended")
            return None
        if self.phase is GamePhase.NOT_STARTED:
            self.start_game()

        logger.info(
            "Round %d started. Direction: %s",
            self.round_number,
            "left" if self.direction == 1 else "right",
        )
        round_winner: Optional[Player] = None
        self.round_ended = False
        turns = 0
        try:
            while not self.round_ended:
                if turns >= self.max_turns_per_round:
                    logger.warning(
                        "Round %d stalled after %d turns; ending it without a winner",
                        self.round_number,
                        turns,
                    )
                    self.end_round()
                    break
                turns += 1
                player = self.get_current_player()
                self._take_turn(player)
                if not player.hand:
                    round_winner = player
                    self.record_event(f"{player.name} wins round {self.round_number}")
                    self.update_scores(player)
                    self.end_round()
                else:
                    self.move_to_next_player()
        except DeckExhausted:
            logger.warning(
                "Deck exhausted in round %d; ending it without a winner", self.round_number
            )
            self.end_round()

        self.phase = GamePhase.ROUND_ENDED
        self.check_game_over()
        snapshot = RoundSnapshot(
            round_number=self.round_number,
            scores=self.scores(),
            round_winner=round_winner.name if round_winner else None,
            game_winner=self.winner.name if self.winner else None,
        )
        try:
            self._export(snapshot)
        finally:
            self.round_number += 1
            if not self.game_over:
                self.reset_round()
        return snapshot

    def _take_turn(self, player: Player) -> None:
        top = self._deck.get_top_discard_pile_card()
        if top is None:
            raise ValueError("No card on discard pile")
        card = player.choose_playable_card(top)
        if card is not None:
            if not card.is_playable(top):
                raise ValueError(f"{player.name} chose {card}, which cannot be played on {top}")
            self._play(player, card)
            return

        drawn = self._deck.draw_card()
        player.add_card(drawn)
        self.record_event(f"{player.name} drew a card")
        if drawn.is_playable(top):
            self._play(player, drawn)

    def _play(self, player: Player, card: Card) -> None:
        player.play_card(card)
        self._deck.put_card_to_discard_pile(card)
        self.current_color = card.color
        self.record_event(f"{player.name} played {card}")
        if isinstance(card, ActionCard):
            card.execute_effect(self)

    def update_scores(self, round_winner: Player) -> int:
        """Credit the round winner with every other hand's card scores."""
        points = sum(p.hand_score() for p in self.players if p is not round_winner)
        round_winner.add_score(points)
        logger.info(
            "%s earns %d points. Total score: %d", round_winner.name, points, round_winner.score
        )
        return points

    def check_game_over(self) -> bool:
        """End the game if anyone has reached ``win_score``.

        The highest score wins; ties go to the earlier seat.
        """
        if self.game_over:
            return True
        contenders = [p for p in self.players if p.score >= self.win_score]
        if not contenders:
            return False
        self.winner = max(contenders, key=lambda p: p.score)
        self.game_over = True
        self.phase = GamePhase.GAME_OVER
        self.record_event(f"{self.winner.name} wins the game with {self.winner.score} points")
        return True

    def _export(self, snapshot: RoundSnapshot) -> None:
        if self._sink is None:
            return
        try:
            self._sink.record(snapshot)
        except Exception:
            logger.exception("Could not export round %d", snapshot.round_number)

    # -- mediator operations -----------------------------------------------

    def get_current_player(self) -> Player:
        return self.players[self.current_player_index]

    def move_to_next_player(self) -> None:
        self.current_player_index = (self.current_player_index + self.direction) % len(self.players)

    def reverse_direction(self) -> None:
        self.direction = -self.direction

    def set_current_color(self, color: Color) -> None:
        self.current_color = color

    def shuffle_hands(self) -> None:
        """Pool every hand, shuffle, and deal it back round-robin from seat 0."""
        pool: List[Card] = []
        for player in self.players:
            pool.extend(player.hand)
            player.clear_hand()
        self._rng.shuffle(pool)
        for i, card in enumerate(pool):
            self.players[i % len(self.players)].add_card(card)

    def get_deck(self) -> Deck:
        """Return a working copy of the deck; commit changes with :meth:`set_deck`."""
        return self._deck.copy()

    def set_deck(self, deck: Deck) -> None:
        self._deck = deck.copy()

    @property
    def deck(self) -> Deck:
        """The authoritative deck, for inspection only."""
        return self._deck

    def end_round(self) -> None:
        self.round_ended = True

    def record_event(self, event: str) -> None:
        logger.info(event)
        self.history.append(event)

    # -- queries -----------------------------------------------------------

    def scores(self) -> Tuple[Tuple[str, int], ...]:
        return tuple((p.name, p.score) for p in self.players)

    def _seat_of(self, player: Player) -> int:
        for i, seated in enumerate(self.players):
            if seated is player:
                return i
        raise ValueError(f"{player.name} is not seated")
