from fifteen.engine.gameparity.parity import Parity

__all__ = ["Parity"]
