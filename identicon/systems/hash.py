"""Hasher stage.

Turns the input into the 16 byte seed every later stage derives from. The
digest algorithm is fixed to MD5.
"""

import hashlib
from typing import Union
from pyrsistent import pvector

from identicon.image import ImageDescriptor


def input_bytes(input: Union[str, bytes]) -> bytes:
    """Raw bytes of ``input``.

    ``str`` is encoded as UTF-8 with ``surrogateescape``, so text decoded from
    ``sys.argv`` or ``os.fsdecode`` maps back to its original bytes. Any other
    lone surrogate is encoded with ``surrogatepass``.
    """
    if not isinstance(input, str):
        return bytes(input)
    try:
        return input.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return input.encode("utf-8", "surrogatepass")


def hash_input(input: Union[str, bytes]) -> ImageDescriptor:
    """MD5 hash of the input, as a ``SEEDED`` descriptor.

    ``str`` input is encoded as UTF-8 (see :func:`input_bytes`); ``bytes`` are
    hashed as-is. The empty string is valid input.

    Example:
        >>> list(hash_input("Chris").seed)
        [148, 79, 172, 254, 177, 83, 180, 240, 25, 22, 160, 241, 102, 252, 195, 21]
    """
    seed = pvector(hashlib.md5(input_bytes(input)).digest())
    return ImageDescriptor(seed=seed)
