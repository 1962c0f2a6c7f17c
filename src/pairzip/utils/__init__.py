from .types import Pair, Producer

__all__ = ["Pair", "Producer"]
