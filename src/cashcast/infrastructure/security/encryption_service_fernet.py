"""Fernet encryption for stored credentials."""

from cryptography.fernet import Fernet, InvalidToken

from cashcast.domain.shared.exceptions import DecryptionError, EncryptionError
from cashcast.domain.shared.value_objects import SecureString


class FernetEncryptionService:
    """Encrypt and decrypt credentials such as the ledger API key."""

    def __init__(self, encryption_key: bytes | str):
        if isinstance(encryption_key, str):
            encryption_key = encryption_key.encode("utf-8")
        try:
            self._fernet = Fernet(encryption_key)
        except (ValueError, TypeError) as e:
            msg = f"Invalid Fernet encryption key: {e}"
            raise ValueError(msg) from e

    def encrypt(self, plaintext: str) -> str:
        try:
            return self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")
        except Exception as e:
            msg = f"Encryption failed: {e}"
            raise EncryptionError(msg) from e

    def decrypt(self, token: str) -> SecureString:
        try:
            plaintext = self._fernet.decrypt(token.encode("ascii")).decode("utf-8")
        except InvalidToken as e:
            msg = "Decryption failed: Invalid token (wrong key or tampered data)"
            raise DecryptionError(msg) from e
        except Exception as e:
            msg = f"Decryption failed: {e}"
            raise DecryptionError(msg) from e
        return SecureString(plaintext)

    @staticmethod
    def generate_key() -> bytes:
        return Fernet.generate_key()
