from fifteen.engine.gameplay.game import PuzzleEngine

__all__ = ["PuzzleEngine"]
