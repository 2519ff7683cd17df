"""Field grids, drone flight planning, pesticide records and widget geometry for a crop-spraying simulator."""

__version__ = "0.1.0"
__all__ = [
    "constants",
    "farewell",
    "fieldgrid",
    "pesticide",
    "planner",
    "widgets",
]