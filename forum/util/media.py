"""Avatar and group icon URL formatting."""

from pydantic import BaseModel

from forum.config import MediaSettings


class Avatar(BaseModel):
    """Avatar URLs in the three sizes the frontend renders."""

    small: str
    medium: str
    large: str


def avatar(img: str, settings: MediaSettings) -> Avatar:
    """Build avatar URLs from a stored avatar reference.

    Args:
        img: Stored avatar path (e.g. ``000/00/00/1.jpg``), may be empty
        settings: Media settings

    Returns:
        Avatar URLs
    """
    img = img or settings.default_avatar
    base = settings.avatar_base_url.rstrip("/")
    return Avatar(
        small=f"{base}/s/{img}",
        medium=f"{base}/m/{img}",
        large=f"{base}/l/{img}",
    )


def group_icon(icon: str, settings: MediaSettings) -> str:
    """Build the group icon URL from a stored icon reference."""
    icon = icon or settings.default_group_icon
    return f"{settings.group_icon_base_url.rstrip('/')}/{icon}"
