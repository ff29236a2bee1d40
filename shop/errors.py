"""
Cart Store Errors

Exception taxonomy for cart persistence plus centralized error messages.
"""

# Parser errors
ERROR_CART_FILE_NOT_FOUND = "Cart file not found"
ERROR_CART_FILE_MALFORMED = "Cart file is not a valid cart document"
ERROR_CART_FILE_IO = "Cart file could not be accessed"
ERROR_CART_NAME_INVALID = "Cart name cannot be used as a file name"
ERROR_CART_NOT_SERIALIZABLE = "Cart items do not match their item lists"


class CartParserError(Exception):
    """Base class for every error raised by the JSON parser."""


class CartFileNotFoundError(CartParserError, FileNotFoundError):
    """Requested cart file does not exist."""


class MalformedCartFileError(CartParserError, ValueError):
    """Cart file exists but is not valid JSON or not shaped like a cart."""


class CartFileIOError(CartParserError, OSError):
    """Filesystem failure other than a missing file (permissions, disk full)."""


class InvalidCartNameError(CartParserError, ValueError):
    """Cart name cannot be mapped to a single file in the resources directory."""


class CartSerializationError(CartParserError, ValueError):
    """Cart cannot be written because an item list holds the wrong kind of item."""


__all__ = [
    "ERROR_CART_FILE_NOT_FOUND",
    "ERROR_CART_FILE_MALFORMED",
    "ERROR_CART_FILE_IO",
    "ERROR_CART_NAME_INVALID",
    "ERROR_CART_NOT_SERIALIZABLE",
    "CartParserError",
    "CartFileNotFoundError",
    "MalformedCartFileError",
    "CartFileIOError",
    "InvalidCartNameError",
    "CartSerializationError",
]
