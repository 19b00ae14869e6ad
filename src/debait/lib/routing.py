"""k-anonymous routing of branding requests.

The branding API is queried by a short prefix of the SHA-256 digest of the
video ID instead of the ID itself. Many IDs share each prefix, so the server
cannot tell which video was requested; the client picks its own entry out of
the returned mapping.
"""

import hashlib

# Fixed by the server protocol; the anonymity set sizing depends on it.
HASH_PREFIX_LENGTH = 4

BRANDING_PATH = "/api/branding/"


def hash_prefix(video_id: str) -> str:
    """Return the first four lowercase hex characters of SHA-256(video_id).

    Examples:
        >>> len(hash_prefix("dQw4w9WgXcQ"))
        4
    """
    digest = hashlib.sha256(video_id.encode("utf-8")).hexdigest()
    return digest[:HASH_PREFIX_LENGTH]


def branding_url(api_base_url: str, video_id: str) -> str:
    """Build the branding endpoint URL for a video ID.

    Args:
        api_base_url: Base URL of the API instance. Trailing slashes are ignored.
        video_id: Video ID to route. Only its hash prefix appears in the URL.

    Returns:
        URL of the form ``{api_base_url}/api/branding/{prefix}``.
    """
    return f"{api_base_url.rstrip('/')}{BRANDING_PATH}{hash_prefix(video_id)}"
