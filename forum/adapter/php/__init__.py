"""PHP serialization adapters."""

from .permission import PhpPermissionDecoder

__all__ = ["PhpPermissionDecoder"]
