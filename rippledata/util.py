"""Small helpers shared across the package: hex rendering and index hashing."""

import hashlib

_BytesLike = (bytes, bytearray, memoryview)


def b2h(data: bytes) -> str:
    """Return ``data`` as an upper-case hexadecimal string."""
    return bytes(data).hex().upper()


def sha512_half(*args: bytes) -> bytes:
    """Hash the concatenation of ``args`` with SHA-512 and keep the first 32 bytes."""
    hasher = hashlib.sha512()
    for item in args:
        if not isinstance(item, _BytesLike):
            raise TypeError(f"cannot hash value of type {type(item).__name__}")
        hasher.update(item)
    return hasher.digest()[:32]