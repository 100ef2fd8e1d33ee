r"""JSON codec shared by every authentication request.

The codec is an immutable value: build it once at import time
(``DEFAULT_CODEC``) or at application start-up and pass it to the
clients. It is safe to share between threads.

Serialization and typed decoding both go through
``pydantic.TypeAdapter``. ``uuid.UUID`` values are written as their
canonical hyphenated 36-character form and UUID-typed fields are read
back from it. Values of unknown types are rejected instead of being
converted with ``str()``.

Example:
    ```pycon
    >>> import uuid
    >>> from authrequest.codec import DEFAULT_CODEC
    >>> DEFAULT_CODEC.encode({"id": uuid.UUID(int=1)})
    b'{"id":"00000000-0000-0000-0000-000000000001"}'
    >>> DEFAULT_CODEC.convert("00000000-0000-0000-0000-000000000001", uuid.UUID)
    UUID('00000000-0000-0000-0000-000000000001')

    ```
"""

from __future__ import annotations

__all__ = ["DEFAULT_CODEC", "JsonCodec"]

import functools
import json
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


@functools.lru_cache(maxsize=256)
def _type_adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


@dataclass(frozen=True)
class JsonCodec:
    r"""Immutable JSON codec for request bodies and typed responses.

    Args:
        exclude_none: If ``True``, fields whose value is ``None`` are
            omitted when serializing dataclasses and pydantic models.

    Example:
        ```pycon
        >>> from dataclasses import dataclass
        >>> from authrequest.codec import JsonCodec
        >>> @dataclass
        ... class Agent:
        ...     name: str
        ...     version: int | None = None
        ...
        >>> JsonCodec(exclude_none=True).encode(Agent(name="Minecraft"))
        b'{"name":"Minecraft"}'

        ```
    """

    exclude_none: bool = False

    def encode(self, value: Any) -> bytes:
        r"""Serialize a value to compact UTF-8 JSON.

        Args:
            value: Any value pydantic can serialize: builtins,
                ``uuid.UUID``, dataclasses, pydantic models...

        Returns:
            The JSON document as bytes.

        Raises:
            pydantic_core.PydanticSerializationError: If ``value``
                contains a type with no JSON representation.
        """
        return _type_adapter(type(value)).dump_json(value, exclude_none=self.exclude_none)

    def decode(self, text: str) -> Any:
        r"""Parse JSON text into a generic JSON value.

        Raises:
            ValueError: If ``text`` is not valid JSON.
        """
        return json.loads(text)

    def convert(self, value: Any, response_type: type[T]) -> T:
        r"""Convert a generic JSON value into ``response_type``.

        Args:
            value: A parsed JSON value (``dict``, ``list``, scalar).
            response_type: Any type supported by ``pydantic.TypeAdapter``
                (dataclass, pydantic model, ``TypedDict``, builtins...).

        Returns:
            The converted value.

        Raises:
            pydantic.ValidationError: If ``value`` does not match
                ``response_type``.
        """
        return _type_adapter(response_type).validate_python(value)


DEFAULT_CODEC = JsonCodec()
