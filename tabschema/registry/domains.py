"""
Attribute domain definitions.

An attribute is either nominal, with a closed and ordered set of value names,
or continuous, with no enumerated values. The two cases are separate types so
that only the nominal one can carry a value mapping.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

from .errors import InvalidDomainError


class AttributeType(Enum):
    """Type tag of an attribute."""
    NOMINAL = "nominal"
    CONTINUOUS = "continuous"


@dataclass(frozen=True)
class NominalDomain:
    """
    Closed value domain of a nominal attribute.

    Value ids are positions in ``values``: dense and contiguous from 0, in
    the order the values were supplied.
    """
    values: Tuple[str, ...]
    index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        values = tuple(self.values)
        if not values:
            raise InvalidDomainError("Nominal domain needs at least one value")

        index = {}
        for value_id, value in enumerate(values):
            if value in index:
                raise InvalidDomainError(f"Duplicate nominal value '{value}'")
            index[value] = value_id

        object.__setattr__(self, "values", values)
        object.__setattr__(self, "index", MappingProxyType(index))

    @property
    def attr_type(self) -> AttributeType:
        return AttributeType.NOMINAL

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class ContinuousDomain:
    """Open numeric domain; carries no values."""

    @property
    def attr_type(self) -> AttributeType:
        return AttributeType.CONTINUOUS

    def __len__(self) -> int:
        return 0


AttributeDomain = Union[NominalDomain, ContinuousDomain]


def make_domain(attr_type: AttributeType,
                nominal_values: Optional[Iterable[str]] = None) -> AttributeDomain:
    """
    Build the domain variant for a type tag.

    Args:
        attr_type: NOMINAL or CONTINUOUS (the enum or its string value)
        nominal_values: Ordered value names; required for NOMINAL, must be
                        empty or None for CONTINUOUS

    Returns:
        NominalDomain or ContinuousDomain

    Raises:
        InvalidDomainError: if the value list does not fit the type
    """
    try:
        attr_type = AttributeType(attr_type)
    except ValueError as err:
        raise InvalidDomainError(f"Unknown attribute type: {attr_type!r}") from err

    if isinstance(nominal_values, (str, bytes)):
        raise InvalidDomainError(
            f"Nominal values must be a sequence of names, not a single string: {nominal_values!r}"
        )

    values = tuple(nominal_values) if nominal_values is not None else ()

    if attr_type is AttributeType.CONTINUOUS:
        if values:
            raise InvalidDomainError(
                f"Continuous attribute cannot have nominal values: {list(values)}"
            )
        return ContinuousDomain()

    return NominalDomain(values)
