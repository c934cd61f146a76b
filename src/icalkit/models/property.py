"""
Property model for iCalendar components.

A component is serialized as an ordered list of properties, each one a
``NAME[;PARAM=VALUE...]:VALUE`` content line. Values stored here are already
escaped; the writer only joins and folds them.
"""

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from icalkit.exceptions import InvalidFieldError


TOKEN_PATTERN = re.compile(r'[A-Za-z0-9-]+')
LINE_BREAK_PATTERN = re.compile(r'[\r\n]')

def _validate_token(name: str, kind: str) -> str:
    if not isinstance(name, str) or not TOKEN_PATTERN.fullmatch(name):
        raise InvalidFieldError(
            f"Invalid {kind} name: {name!r}",
            field=kind,
            details={"name": name}
        )
    return name.upper()

def _validate_single_line(value: str, name: str) -> str:
    if LINE_BREAK_PATTERN.search(value):
        raise InvalidFieldError(
            f"Raw line break in {name} value: {value!r}",
            field=name
        )
    return value

@dataclass(frozen=True)
class Property:
    """A single named, parameterized property.

    Parameters are read-only and take no part in hashing.
    """
    name: str
    value: str
    parameters: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        name = _validate_token(self.name, 'property')
        object.__setattr__(self, 'name', name)
        _validate_single_line(self.value, name)
        object.__setattr__(self, 'parameters', MappingProxyType({
            _validate_token(key, 'parameter'): _validate_single_line(value, key.upper())
            for key, value in self.parameters.items()
        }))

class PropertySet:
    """Ordered bag of properties.

    Insertion order is output order. Properties sharing a name are kept as
    separate entries; nothing is ever replaced or merged.
    """

    def __init__(self) -> None:
        self._properties: list[Property] = []

    def add(self, prop: Property) -> None:
        """Append a property."""
        self._properties.append(prop)

    def set(self, name: str, value: str | int) -> None:
        """Append a parameterless property.

        Despite the name this never updates an existing entry: calling it
        twice with the same name yields two properties.
        """
        self.add(Property(name, str(value)))

    def names(self) -> list[str]:
        return [prop.name for prop in self._properties]

    def get(self, name: str) -> Property | None:
        """Return the first property called name, if any."""
        name = name.upper()
        for prop in self._properties:
            if prop.name == name:
                return prop
        return None

    def get_all(self, name: str) -> list[Property]:
        name = name.upper()
        return [prop for prop in self._properties if prop.name == name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __getitem__(self, index: int) -> Property:
        return self._properties[index]

    def __repr__(self) -> str:
        return f"PropertySet({self.names()!r})"
