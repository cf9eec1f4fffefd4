"""Exceptions raised by the Game of Life engine."""


class InvalidDimension(ValueError):
    """Raised when a universe is constructed with a non-positive size."""

    def __init__(self, width, height) -> None:
        self.width = width
        self.height = height
        super().__init__(f"Universe dimensions must be positive integers, got {width}x{height}")
