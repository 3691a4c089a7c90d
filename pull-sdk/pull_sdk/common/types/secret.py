from typing import Any, Optional

from pull_sdk.common.exceptions import ConfigError

MASK = "**********"


class SecretKey:
    """
    Holder for private key material.

    The key is kept in a mutable buffer that is zeroed when the holder is
    wiped, garbage collected or leaves a ``with`` block. It never shows up in
    ``repr``/``str`` and refuses to be pickled, so it can't end up in logs or
    serialized configs by accident.

    :param secret: The secret, e.g an hexadecimal private key or a mnemonic.
    """

    __slots__ = ("_buffer", "_wiped")

    def __init__(self, secret: str | bytes):
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        if not secret:
            raise ConfigError("Secret key can't be empty")
        self._buffer: Optional[bytearray] = bytearray(secret)
        self._wiped = False

    @classmethod
    def from_value(cls, value: Any) -> "SecretKey":
        if isinstance(value, SecretKey):
            return value
        if isinstance(value, (str, bytes)):
            return cls(value)
        raise ConfigError(
            f"Secret key must be a string or bytes, got {type(value).__name__}"
        )

    def reveal(self) -> str:
        """
        Return the secret as a string. Only meant to be handed to a signer.
        """
        return self.reveal_bytes().decode("utf-8")

    def reveal_bytes(self) -> bytes:
        if self._wiped or self._buffer is None:
            raise ConfigError("Secret key has been wiped")
        return bytes(self._buffer)

    def wipe(self) -> None:
        buffer = getattr(self, "_buffer", None)
        if buffer is not None:
            for i in range(len(buffer)):
                buffer[i] = 0
        self._buffer = None
        self._wiped = True

    @property
    def is_wiped(self) -> bool:
        return self._wiped

    def __enter__(self) -> "SecretKey":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.wipe()

    def __del__(self) -> None:
        self.wipe()

    def __reduce__(self):
        raise TypeError("SecretKey can't be serialized")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return self._buffer == other._buffer and self._wiped == other._wiped

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SecretKey('{MASK}')"

    def __str__(self) -> str:
        return MASK
