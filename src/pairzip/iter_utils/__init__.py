from .zipper import Zipper, ZipIterator, zipper

__all__ = ["ZipIterator", "Zipper", "zipper"]
