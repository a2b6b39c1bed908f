"""
Domain models and value objects.
"""

from advcalc.core.domain.statistics import DescriptiveStatistics

__all__ = [
    "DescriptiveStatistics",
]
