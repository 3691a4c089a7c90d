import inspect
from functools import wraps
from typing import Any, Callable, List, Sequence, TypeVar

from asgiref.sync import async_to_sync

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


def bytes_to_hex(data: bytes) -> str:
    """
    Return the 0x prefixed hexadecimal representation of some bytes.
    e.g bytes_to_hex(b"\\xab\\xc1") -> "0xabc1"
    """
    return "0x" + data.hex()


def hex_to_bytes(value: str) -> bytes:
    """
    Convert an hexadecimal string, with or without the 0x prefix, to bytes.

    :raises ValueError: if the string is not valid hexadecimal
    """
    if value.startswith(("0x", "0X")):
        value = value[2:]
    if len(value) % 2 == 1:
        value = "0" + value
    return bytes.fromhex(value)


def coerce_bytes(value: Any) -> bytes:
    """
    Normalize the different encodings a proof can be served with into bytes.
    Accepts bytes, an hexadecimal string or a list of byte values.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return hex_to_bytes(value)
    if isinstance(value, Sequence):
        try:
            return bytes(value)
        except TypeError as e:
            raise ValueError(f"Cannot read bytes from {value!r}") from e
    raise ValueError(f"Cannot read bytes from {type(value).__name__}")


def is_hex(value: str, min_len: int = 1, max_len: int = 64) -> bool:
    """
    Check that a string is 0x prefixed and carries between `min_len` and
    `max_len` hexadecimal characters.
    """
    if not value.startswith("0x"):
        return False
    digits = value[2:]
    if not min_len <= len(digits) <= max_len:
        return False
    try:
        int(digits, 16)
    except ValueError:
        return False
    return True


def format_indexes(pair_indexes: List[int]) -> str:
    return ",".join(str(index) for index in pair_indexes) or "<none>"


def make_sync(fn: F) -> Callable[..., Any]:
    sync_fun = async_to_sync(fn)

    @wraps(fn)
    def impl(*args: Any, **kwargs: Any) -> Any:
        return sync_fun(*args, **kwargs)

    return impl


def add_sync_methods(original_class: T) -> T:
    """
    Decorator for adding a synchronous version of a class.
    :param original_class: Input class
    :return: Input class with .sync property that contains synchronous version of this class
    """
    properties = {**original_class.__dict__}
    for name, value in properties.items():
        sync_name = name + "_sync"

        # Handwritten implementation exists
        if sync_name in properties:
            continue

        # Make all callables synchronous
        if inspect.iscoroutinefunction(value):
            setattr(original_class, sync_name, make_sync(value))
            _set_sync_method_docstring(original_class, sync_name)
        elif isinstance(value, staticmethod) and inspect.iscoroutinefunction(
            value.__func__
        ):
            setattr(original_class, sync_name, staticmethod(make_sync(value.__func__)))
            _set_sync_method_docstring(original_class, sync_name)
        elif isinstance(value, classmethod) and inspect.iscoroutinefunction(
            value.__func__
        ):
            setattr(original_class, sync_name, classmethod(make_sync(value.__func__)))

    return original_class


def _set_sync_method_docstring(original_class: Any, sync_name: str) -> None:
    sync_method = getattr(original_class, sync_name)
    sync_method.__doc__ = "Synchronous version of the method."
