"""
Deterministic serialization for cache keys.

Two requests asking for the same thing must map to the same cache entry no
matter how their parameters were ordered, so keys are built from a canonical
JSON form: object keys sorted, no whitespace, minimal string escaping.
Floats are rejected because their textual form is not stable enough to key on.
"""

from typing import Any


class KeyCanonicalizer:
    """
    Canonical JSON writer for cache-key parameters.

    Supports None, bools, ints, strings, dicts with string keys, and
    lists/tuples of those.
    """

    def canonicalize(self, value: Any) -> str:
        """
        Canonicalize a Python value to a compact, key-sorted JSON string.

        Args:
            value: A JSON-compatible value without floats

        Returns:
            Canonical JSON string

        Raises:
            TypeError: If the value contains an unsupported type
        """
        return self._canonicalize_value(value)

    def _canonicalize_value(self, value: Any) -> str:
        if value is None:
            return "null"
        elif isinstance(value, bool):
            return "true" if value else "false"
        elif isinstance(value, str):
            return self._canonicalize_string(value)
        elif isinstance(value, int):
            return str(value)
        elif isinstance(value, dict):
            return self._canonicalize_object(value)
        elif isinstance(value, (list, tuple)):
            return "[" + ",".join(self._canonicalize_value(item) for item in value) + "]"
        else:
            raise TypeError(f"Cannot use {type(value).__name__} in a cache key")

    def _canonicalize_object(self, obj: dict[str, Any]) -> str:
        pairs = []
        for key in sorted(obj):
            if not isinstance(key, str):
                raise TypeError(f"Cache key object keys must be str, got {type(key).__name__}")
            pairs.append(f"{self._canonicalize_string(key)}:{self._canonicalize_value(obj[key])}")
        return "{" + ",".join(pairs) + "}"

    def _canonicalize_string(self, s: str) -> str:
        """Quote a string, escaping only what JSON requires."""
        result = ['"']
        for char in s:
            code = ord(char)
            if char == '"':
                result.append('\\"')
            elif char == '\\':
                result.append('\\\\')
            elif code == 0x0A:
                result.append('\\n')
            elif code == 0x09:
                result.append('\\t')
            elif code < 0x20:
                result.append(f'\\u{code:04x}')
            else:
                result.append(char)
        result.append('"')
        return ''.join(result)


_canonicalizer = KeyCanonicalizer()


def canonicalize(value: Any) -> str:
    """Canonicalize a value with the module-level KeyCanonicalizer."""
    return _canonicalizer.canonicalize(value)


def cache_key(namespace: str, /, **params: Any) -> str:
    """
    Build a cache key of the form ``namespace:{canonical params}``.

    Example:
        ```python
        >>> cache_key("releases", owner="octo", repo="hello", page=0, per_page=30)
        'releases:{"owner":"octo","page":0,"per_page":30,"repo":"hello"}'
        ```
    """
    return f"{namespace}:{canonicalize(params)}"
