"""
Copyright 2024 Nomios UK&I

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import typing as t
from collections.abc import Mapping
from enum import Enum

from .exceptions import DuplicateParameterError


ParamValue = t.Union[str, int, Enum]
ParamSource = t.Union[
    "Params", t.Mapping[str, ParamValue], t.Iterable[t.Tuple[str, ParamValue]]
]


def _to_text(value: ParamValue) -> str:
    """
    Convert a parameter value to its wire text.

    Args:
        value (ParamValue): A string, integer or enum member.

    Returns:
        str: The wire text of the value.
    """
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class Params:
    """
    An ordered set of unique string key/value pairs.

    Used for attribute bags and child element bags alike; rendering as
    attributes or child elements is decided by the RPC family, not here.
    """

    __slots__ = ("_pairs",)

    def __init__(self, source: t.Optional[ParamSource] = None, **kwargs: ParamValue):
        """
        Initialise the parameter set.

        Args:
            source (t.Optional[ParamSource]): Pairs or mapping, in order.
            **kwargs (ParamValue): Extra pairs appended after source.

        Raises:
            DuplicateParameterError: when a key is repeated.
        """
        pairs: t.List[t.Tuple[str, str]] = []
        seen: t.Set[str] = set()

        if source is None:
            items: t.Iterable[t.Tuple[str, ParamValue]] = ()
        elif isinstance(source, Params):
            items = source._pairs
        elif isinstance(source, Mapping):
            items = source.items()
        else:
            items = source

        for key, value in [*items, *kwargs.items()]:
            if key in seen:
                raise DuplicateParameterError(key)
            seen.add(key)
            pairs.append((key, _to_text(value)))

        self._pairs: t.Tuple[t.Tuple[str, str], ...] = tuple(pairs)

    def with_param(self, key: str, value: ParamValue) -> "Params":
        """
        Return a copy with one pair appended.

        Raises:
            DuplicateParameterError: when the key already exists.
        """
        return Params([*self._pairs, (key, value)])

    def merged(self, other: ParamSource) -> "Params":
        """
        Return a copy with all pairs of other appended.

        Raises:
            DuplicateParameterError: when a key exists in both.
        """
        return Params([*self._pairs, *Params(other)._pairs])

    def keys(self) -> t.List[str]:
        return [key for key, _ in self._pairs]

    def get(self, key: str, default: t.Optional[str] = None) -> t.Optional[str]:
        for k, value in self._pairs:
            if k == key:
                return value
        return default

    def __iter__(self) -> t.Iterator[t.Tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Params):
            return NotImplemented
        return self._pairs == other._pairs

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __repr__(self) -> str:
        inner = ", ".join(f"{key}={value!r}" for key, value in self._pairs)
        return f"Params({inner})"
