"""Series transforms applied between parsing and alignment"""

from .moving_average import MovingAverageTransform, smooth

__all__ = [
    "MovingAverageTransform",
    "smooth",
]
