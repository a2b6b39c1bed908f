"""Calculator — фасад над численным ядром и его конфигурация."""

from .advanced import AdvancedCalculator
from .config import CalculusConfig, DisplayConfig

__all__ = [
    "AdvancedCalculator",
    "CalculusConfig",
    "DisplayConfig",
]
