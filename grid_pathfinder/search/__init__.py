"""search package."""

from .astar import AStarSearch, SearchResult, SearchState, find_path
from .frontier import Frontier

__all__ = ["AStarSearch", "SearchResult", "SearchState", "Frontier", "find_path"]
