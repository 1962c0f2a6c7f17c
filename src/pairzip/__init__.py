from pairzip.iter_utils import Zipper, ZipIterator, zipper
from pairzip.utils.types import Pair, Producer

__all__ = ["Pair", "Producer", "ZipIterator", "Zipper", "zipper"]
