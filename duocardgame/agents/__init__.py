"""Built-in strategies."""

from duocardgame.agents.heuristic import ColorPreferenceStrategy
from duocardgame.agents.random_agent import RandomStrategy

STRATEGIES = {
    ColorPreferenceStrategy.name: ColorPreferenceStrategy,
    RandomStrategy.name: RandomStrategy,
}

__all__ = ["ColorPreferenceStrategy", "RandomStrategy", "STRATEGIES"]
