"""Decoder for permission bags stored as PHP-serialized arrays.

The legacy site stores each role's permissions as ``serialize()`` output,
e.g. ``a:2:{s:8:"ban_post";s:1:"1";s:6:"report";s:1:"0";}``.
"""

from typing import Any

import logfire
import phpserialize

from forum.domain.error import PermissionDecodeError
from forum.domain.service import PermissionDecoder
from forum.domain.value import Permission


class PhpPermissionDecoder(PermissionDecoder):
    """PermissionDecoder backed by ``phpserialize``."""

    def decode(self, blob: str) -> Permission:
        """Decode a PHP-serialized permission array.

        Args:
            blob: Serialized array

        Returns:
            Permission with every known flag whose value is ``"1"`` set

        Raises:
            PermissionDecodeError: If the blob is not a serialized array
        """
        try:
            data = phpserialize.loads(blob.encode("utf-8"), decode_strings=True)
        except (ValueError, TypeError) as e:
            raise PermissionDecodeError(f"malformed permission blob: {e}") from e

        if not isinstance(data, dict):
            raise PermissionDecodeError(
                f"permission blob is a {type(data).__name__}, not an array"
            )

        known = Permission.field_names()
        flags = {
            str(key): _is_granted(value)
            for key, value in data.items()
            if str(key) in known
        }
        unknown = [str(key) for key in data if str(key) not in known]
        if unknown:
            logfire.debug("Ignoring unknown permission keys", keys=unknown)
        return Permission(**flags)


def _is_granted(value: Any) -> bool:
    # bool is an int subclass, so True passes the second check
    if isinstance(value, str):
        return value == "1"
    if isinstance(value, int):
        return value == 1
    return False
