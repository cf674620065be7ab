"""Configuration classes for ecgen output."""

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass
class RenderConfig:
    """Configuration for printing enumerated states."""

    # Symbols used to draw a bit-vector
    zero_symbol: str = "⬜"
    one_symbol: str = "⬛"

    # Maximum number of states printed by default
    max_states: int = 10_000

    def clamp_states(self, count: int) -> int:
        """Return how many of ``count`` states should be printed."""
        return max(0, min(count, self.max_states))

    def render_bits(self, bits: Iterable[Any]) -> str:
        """Draw a bit-vector with the configured symbols."""
        return "".join(self.one_symbol if b else self.zero_symbol for b in bits)


# Global configuration instance
RENDER_CONFIG = RenderConfig()
