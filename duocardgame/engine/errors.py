"""Engine exceptions."""


class DuoCardGameError(Exception):
    """Base class for engine errors."""


class InvalidCardValue(DuoCardGameError, ValueError):
    """A card was constructed with a number or color it cannot have."""


class DeckExhausted(DuoCardGameError):
    """A draw was requested but neither pile can supply a card."""
