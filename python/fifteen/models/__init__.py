from fifteen.models.board import Board, Direction, MoveModel
from fifteen.models.style import TileStyle, TileView

__all__ = ["Board", "Direction", "MoveModel", "TileStyle", "TileView"]
