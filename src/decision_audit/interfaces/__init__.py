from .extraction import ITextExtractor

__all__ = ["ITextExtractor"]
