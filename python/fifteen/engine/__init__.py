from fifteen.engine.gamegenerator import GameGenerator
from fifteen.engine.gameparity import Parity
from fifteen.engine.gameplay import PuzzleEngine
from fifteen.engine.gamestate import GameState

__all__ = ["GameGenerator", "GameState", "Parity", "PuzzleEngine"]
