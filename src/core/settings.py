"""Run and display settings for Life front ends."""


class LifeSettings:
    """Settings shared by the CLI and pointer/drawing helpers."""

    def __init__(self,
                 square_size: float = 5.0,
                 window_size: int = 1024,
                 millis_per_frame: int = 10,
                 dead_char: str = '.',
                 alive_char: str = '*'):
        """Initialize settings.

        Args:
            square_size: Side of one drawn cell in pixels (>0)
            window_size: Side of the square window in pixels (1+)
            millis_per_frame: Minimum milliseconds between generations (0+)
            dead_char: Configuration marker for dead cells
            alive_char: Configuration marker for live cells
        """
        self.square_size = max(1.0, float(square_size))
        self.window_size = max(1, int(window_size))
        self.millis_per_frame = max(0, int(millis_per_frame))
        self.dead_char = dead_char
        self.alive_char = alive_char

    @property
    def origin_offset(self) -> float:
        """Pixel offset that places cell (0, 0) at the window centre."""
        return float(self.window_size // 2)

    def copy(self) -> 'LifeSettings':
        """Create a copy of the settings."""
        return LifeSettings(
            square_size=self.square_size,
            window_size=self.window_size,
            millis_per_frame=self.millis_per_frame,
            dead_char=self.dead_char,
            alive_char=self.alive_char
        )

    def __repr__(self) -> str:
        return (f"LifeSettings(square_size={self.square_size}, window_size={self.window_size}, "
                f"millis_per_frame={self.millis_per_frame}, "
                f"markers={self.dead_char!r}/{self.alive_char!r})")
