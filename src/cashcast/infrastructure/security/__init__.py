"""Security infrastructure: credential encryption and caching."""

from cashcast.infrastructure.security.credential_cache import CredentialCache
from cashcast.infrastructure.security.encryption_service_fernet import (
    FernetEncryptionService,
)

__all__ = ["CredentialCache", "FernetEncryptionService"]
