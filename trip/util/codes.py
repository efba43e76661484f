"""Human-shareable codes for invites and placeholder claims.

Codes use Crockford's base32 alphabet, which leaves out I, L, O and U so
that codes read aloud or retyped are hard to get wrong. Only the SHA-256
digest of a code is ever persisted.
"""

import hashlib
import secrets

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

_BITS_PER_SYMBOL = 5
_SYMBOL_MASK = (1 << _BITS_PER_SYMBOL) - 1


def normalize_code(raw: str) -> str:
    """Canonicalize user input: trim, uppercase, drop spaces and hyphens."""
    return raw.strip().upper().replace(" ", "").replace("-", "")


def generate_code(length: int = 10) -> str:
    """Generate a random code of exactly ``length`` symbols.

    Random bytes are consumed five bits at a time. Any symbols still missing
    once the bytes run out are drawn independently instead of being padded
    with zero bits, which would bias the tail of the code.

    Args:
        length: Number of symbols to produce

    Returns:
        Code drawn from ALPHABET

    Raises:
        ValueError: If length is not positive
    """
    if length < 1:
        raise ValueError("Code length must be positive")

    data = secrets.token_bytes((length * _BITS_PER_SYMBOL + 7) // 8)
    symbols: list[str] = []
    buffer = 0
    bits = 0
    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= _BITS_PER_SYMBOL and len(symbols) < length:
            bits -= _BITS_PER_SYMBOL
            symbols.append(ALPHABET[(buffer >> bits) & _SYMBOL_MASK])
        buffer &= (1 << bits) - 1

    while len(symbols) < length:
        symbols.append(ALPHABET[secrets.randbelow(len(ALPHABET))])

    return "".join(symbols)


def hash_code(text: str) -> str:
    """Return the lowercase hex SHA-256 digest of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
