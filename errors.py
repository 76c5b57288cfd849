"""
Exception types for the favicons generator
"""


class FaviconsError(Exception):
    """Base class for all generator errors"""


class ImageProcessingError(FaviconsError):
    """A single raster job could not decode, resize or write its image"""


class IconPackError(FaviconsError):
    """The favicon.ico container could not be written"""


class ValidationError(FaviconsError):
    """Bad user input, raised before any file is touched"""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field
        self.message = message


class GenerationError(FaviconsError):
    """Infrastructure failure that aborts the whole run"""
