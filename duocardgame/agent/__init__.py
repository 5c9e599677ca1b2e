"""Player decision protocol."""

from duocardgame.agent.protocol import Strategy

__all__ = ["Strategy"]
