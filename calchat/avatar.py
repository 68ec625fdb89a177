"""Avatar URL helper."""

import hashlib

GRAVATAR_URL = "https://www.gravatar.com/avatar/{hash}?d=identicon"


def get_avatar_url(email: str, avatar: str | None = None) -> str:
    """Return the user's own avatar, or their Gravatar identicon."""
    if avatar:
        return avatar
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return GRAVATAR_URL.format(hash=digest)
