"""Nested Key-Path Store

Purpose: Assemble sparse, JSON-shaped request payloads addressed by dotted paths

A ``NestedMap`` is a tree whose interior nodes are maps and whose leaves are
one of a small set of value kinds:

- ``str``
- ``bool``
- ``None`` (an explicit "clear this field" marker)
- a list of ``IdpCertificate``

Setting ``"idpConfig.ssoUrl"`` creates (or reuses) the ``idpConfig`` map and
stores the leaf under ``ssoUrl``. The dotted paths of every leaf form the
update mask sent along with PATCH requests.
"""

from typing import Any, Dict, List, Union

from saml_config_client.domain.models.provider_config import IdpCertificate

LeafValue = Union[str, bool, None, List[IdpCertificate]]

_MISSING = object()


def _check_leaf(path: str, value: Any) -> None:
    """Reject values outside the supported leaf kinds"""
    if value is None or isinstance(value, (str, bool)):
        return
    if isinstance(value, list) and all(isinstance(item, IdpCertificate) for item in value):
        return
    raise TypeError(
        f"unsupported value for '{path}': {type(value).__name__} "
        "(expected str, bool, None or a list of IdpCertificate)"
    )


class NestedMap:
    """Sparse map keyed by dot-separated paths"""

    SEPARATOR = "."

    def __init__(self):
        self._root: Dict[str, Any] = {}

    def set(self, path: str, value: LeafValue) -> None:
        """Store a leaf value at the given dotted path.

        Intermediate maps are created as needed. A prior leaf at the same path
        is overwritten.

        Args:
            path: Dotted field path (e.g. ``idpConfig.ssoUrl``)
            value: Leaf value

        Raises:
            TypeError: If value is not a supported leaf kind
            ValueError: If the path is empty or an intermediate segment
                already holds a leaf
        """
        segments = self._split(path)
        _check_leaf(path, value)

        curr = self._root
        for idx, segment in enumerate(segments[:-1]):
            child = curr.get(segment, _MISSING)
            if child is _MISSING:
                child = {}
                curr[segment] = child
            elif not isinstance(child, dict):
                prefix = self.SEPARATOR.join(segments[: idx + 1])
                raise ValueError(f"cannot set '{path}': '{prefix}' already holds a value")
            curr = child

        last = segments[-1]
        if isinstance(curr.get(last), dict):
            raise ValueError(f"cannot set '{path}': it already holds nested fields")
        curr[last] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Return the leaf value at the given path, or ``default`` if absent.

        A path whose intermediate segment is missing or is not a nested map
        is reported as absent.
        """
        value = self._lookup(path)
        return default if value is _MISSING else value

    def update_mask(self) -> List[str]:
        """Flatten the store into the dotted paths of all present leaves"""
        return _build_mask(self._root)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain nested dict for JSON serialization"""
        return _to_json_compatible(self._root)

    def _lookup(self, path: str) -> Any:
        curr: Any = self._root
        for segment in path.split(self.SEPARATOR):
            if not isinstance(curr, dict):
                return _MISSING
            curr = curr.get(segment, _MISSING)
            if curr is _MISSING:
                return _MISSING
        if isinstance(curr, dict):
            # Interior node, not a leaf
            return _MISSING
        return curr

    def _split(self, path: str) -> List[str]:
        segments = path.split(self.SEPARATOR) if isinstance(path, str) else []
        if not segments or not all(segments):
            raise ValueError(f"invalid field path: {path!r}")
        return segments

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self._lookup(path) is not _MISSING

    def __len__(self) -> int:
        return len(self._root)

    def __repr__(self) -> str:
        return f"NestedMap({self.to_dict()!r})"


def _build_mask(data: Dict[str, Any]) -> List[str]:
    mask = []
    for key, value in data.items():
        if isinstance(value, dict):
            mask.extend(f"{key}.{item}" for item in _build_mask(value))
        else:
            mask.append(key)
    return mask


def _to_json_compatible(data: Dict[str, Any]) -> Dict[str, Any]:
    result = {}
    for key, value in data.items():
        if isinstance(value, dict):
            result[key] = _to_json_compatible(value)
        elif isinstance(value, list):
            result[key] = [cert.model_dump(by_alias=True) for cert in value]
        else:
            result[key] = value
    return result
