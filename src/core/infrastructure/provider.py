"""Process-wide media storage instance.

Credentials are resolved and the Cloudinary adapter is built once per
execution environment (on the first invocation after a cold start); every
handler then passes that same instance explicitly into its service.
"""

from functools import lru_cache

from core.infrastructure.cloudinary.cloudinary_media_storage import CloudinaryMediaStorage
from core.repositories.media_repository import MediaStorageRepository


@lru_cache(maxsize=1)
def get_media_storage() -> MediaStorageRepository:
    """Return the long-lived media storage for this execution environment.

    Raises:
        ProviderConfigError: If provider credentials are not configured
    """
    return CloudinaryMediaStorage()
