"""JSON file persistence for carts: one `<cart name>.json` file per cart."""
import json
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from shop.cart import Cart
from shop.config import get_settings
from shop.errors import (
    ERROR_CART_FILE_IO,
    ERROR_CART_FILE_MALFORMED,
    ERROR_CART_FILE_NOT_FOUND,
    ERROR_CART_NAME_INVALID,
    ERROR_CART_NOT_SERIALIZABLE,
    CartFileIOError,
    CartFileNotFoundError,
    CartSerializationError,
    InvalidCartNameError,
    MalformedCartFileError,
)
from shop.logging import get_logger, sanitize_string_for_logging

from .schemas import CartDocument

logger = get_logger(__name__)

CART_FILE_SUFFIX = ".json"

PathLike = Union[str, os.PathLike]


def _validate_cart_name(name: Optional[str]) -> str:
    """
    Reject names that cannot be a single file inside the resources directory.

    Any other character (":", "?", "*", spaces, unicode) is kept verbatim.
    """
    if not name or name in (".", ".."):
        raise InvalidCartNameError(f"{ERROR_CART_NAME_INVALID}: {name!r}")
    separators = {"/", "\x00", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators):
        raise InvalidCartNameError(f"{ERROR_CART_NAME_INVALID}: {name!r}")
    return name


class JsonParser:
    """
    Serializes carts to `<resources_dir>/<cart name>.json` and reads them back.

    Each call opens, fully reads or writes, and closes a single file.
    Existing files are overwritten; there is no locking or atomic replace.
    """

    def __init__(self, resources_dir: Optional[PathLike] = None):
        if resources_dir is None:
            resources_dir = get_settings().resources_dir
        self.resources_dir = Path(resources_dir)

    def path_for(self, cart: Union[Cart, str]) -> Path:
        """File path a cart (or cart name) is persisted to."""
        name = cart.cart_name if isinstance(cart, Cart) else cart
        return self.resources_dir / f"{_validate_cart_name(name)}{CART_FILE_SUFFIX}"

    def write_to_file(self, cart: Cart) -> Path:
        """
        Write the whole cart as compact JSON, replacing any previous file.

        Args:
            cart: Cart to persist

        Returns:
            Path of the written file

        Raises:
            InvalidCartNameError: cart name is not usable as a file name
            CartSerializationError: an item list holds an object of another variant
            CartFileIOError: the file or resources directory could not be written
        """
        path = self.path_for(cart)
        try:
            document = CartDocument.from_cart(cart)
        except (TypeError, ValidationError) as e:
            logger.warning(
                f"Cart {sanitize_string_for_logging(cart.cart_name)} holds items in the wrong list: {e}"
            )
            raise CartSerializationError(f"{ERROR_CART_NOT_SERIALIZABLE}: {cart.cart_name!r}") from e
        payload = json.dumps(
            document.model_dump(by_alias=True),
            ensure_ascii=False,
            separators=(",", ":"),
        )

        try:
            self.resources_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            logger.warning(
                f"Failed to write cart {sanitize_string_for_logging(cart.cart_name)}: {e}"
            )
            raise CartFileIOError(f"{ERROR_CART_FILE_IO}: {path}") from e

        logger.debug(
            f"Wrote cart {sanitize_string_for_logging(cart.cart_name)} "
            f"({len(cart)} items) to {path}"
        )
        return path

    def read_from_file(self, file: PathLike) -> Cart:
        """
        Load a cart from a JSON file (single- or multi-line).

        The stored total price is restored as-is, not recomputed.

        Args:
            file: Path of the cart file

        Returns:
            Reconstructed cart

        Raises:
            CartFileNotFoundError: file does not exist
            MalformedCartFileError: content is not valid JSON or not a cart document
            CartFileIOError: file exists but could not be read
        """
        path = Path(file)

        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError as e:
            logger.warning(f"Cart file not found: {path}")
            raise CartFileNotFoundError(f"{ERROR_CART_FILE_NOT_FOUND}: {path}") from e
        except UnicodeDecodeError as e:
            logger.warning(f"Cart file is not UTF-8 text: {path}")
            raise MalformedCartFileError(f"{ERROR_CART_FILE_MALFORMED}: {path}") from e
        except OSError as e:
            logger.warning(f"Failed to read cart file {path}: {e}")
            raise CartFileIOError(f"{ERROR_CART_FILE_IO}: {path}") from e

        try:
            document = CartDocument.model_validate(json.loads(raw))
        except (json.JSONDecodeError, RecursionError, ValidationError) as e:
            logger.warning(f"Malformed cart file {path}: {e}")
            raise MalformedCartFileError(f"{ERROR_CART_FILE_MALFORMED}: {path}") from e

        cart = document.to_cart()
        logger.debug(
            f"Read cart {sanitize_string_for_logging(cart.cart_name)} "
            f"({len(cart)} items) from {path}"
        )
        return cart


__all__ = ["JsonParser", "CART_FILE_SUFFIX"]
