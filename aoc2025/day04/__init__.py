from .grid import Grid
from .simulator import count_accessible, count_removable, removal_rounds, solve

__all__ = [
    "Grid",
    "count_accessible",
    "count_removable",
    "removal_rounds",
    "solve",
]
