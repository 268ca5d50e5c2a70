"""Shared value objects."""

from cashcast.domain.shared.value_objects.secure_string import SecureString

__all__ = ["SecureString"]
