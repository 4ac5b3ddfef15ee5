"""Simulation configuration: grid dimensions, frame pacing and glyphs."""

from .core.grid import ALIVE_CHAR, DEAD_CHAR

DEFAULT_HEIGHT = 20
DEFAULT_WIDTH = 40
DEFAULT_DELAY_MS = 439


class SimulationConfig:
    """Fixed parameters for one simulation run."""

    def __init__(self,
                 height: int = DEFAULT_HEIGHT,
                 width: int = DEFAULT_WIDTH,
                 delay_ms: int = DEFAULT_DELAY_MS,
                 alive_char: str = ALIVE_CHAR,
                 dead_char: str = DEAD_CHAR):
        """Initialize simulation configuration.

        Args:
            height: Grid rows (> 0)
            width: Grid columns (> 0)
            delay_ms: Pause between generations in milliseconds (>= 0)
            alive_char: Single character drawn for live cells
            dead_char: Single character drawn for dead cells

        Raises:
            ValueError: If any parameter is out of range
        """
        if height < 1 or width < 1:
            raise ValueError("Grid dimensions must be positive")
        if delay_ms < 0:
            raise ValueError("Frame delay cannot be negative")
        if len(alive_char) != 1 or len(dead_char) != 1:
            raise ValueError("Cell glyphs must be single characters")

        self.height = height
        self.width = width
        self.delay_ms = delay_ms
        self.alive_char = alive_char
        self.dead_char = dead_char

    @property
    def delay_seconds(self) -> float:
        """Frame delay in seconds, as accepted by time.sleep."""
        return self.delay_ms / 1000.0

    def copy(self) -> 'SimulationConfig':
        """Create a copy of the configuration."""
        return SimulationConfig(
            height=self.height,
            width=self.width,
            delay_ms=self.delay_ms,
            alive_char=self.alive_char,
            dead_char=self.dead_char
        )

    def __repr__(self) -> str:
        return (f"SimulationConfig(height={self.height}, width={self.width}, "
                f"delay_ms={self.delay_ms})")


DEFAULT_CONFIG = SimulationConfig()
