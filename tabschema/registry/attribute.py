"""
A single attribute (field) of a tabular dataset schema.
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .domains import (
    AttributeDomain,
    AttributeType,
    ContinuousDomain,
    NominalDomain,
    make_domain
)
from .errors import InvalidValueIdError, TypeMismatchError, UnknownValueError
from .types import AttributeId, ValueId


class Attribute:
    """
    One field of a dataset: name, id, type and, if nominal, its value domain.

    Instances are immutable. The id is the position the attribute was given
    in its owning AttributeSet; the set itself never trusts it for lookups.
    """

    __slots__ = ("_name", "_id", "_domain")

    def __init__(self,
                 name: str,
                 attr_id: AttributeId,
                 attr_type: AttributeType,
                 nominal_values: Optional[Iterable[str]] = None):
        """
        Initialize attribute.

        Args:
            name: Attribute name, unique within its set
            attr_id: Non-negative position in the owning set
            attr_type: NOMINAL or CONTINUOUS
            nominal_values: Ordered value names (NOMINAL only); value ids are
                            assigned 0, 1, 2, ... in this order

        Raises:
            InvalidDomainError: if nominal_values does not fit attr_type
            ValueError: if attr_id is negative
        """
        if attr_id < 0:
            raise ValueError(f"Attribute id must be non-negative, got {attr_id}")
        self._name = name
        self._id = attr_id
        self._domain = make_domain(attr_type, nominal_values)

    @classmethod
    def nominal(cls, name: str, attr_id: AttributeId,
                values: Iterable[str]) -> "Attribute":
        return cls(name, attr_id, AttributeType.NOMINAL, values)

    @classmethod
    def continuous(cls, name: str, attr_id: AttributeId) -> "Attribute":
        return cls(name, attr_id, AttributeType.CONTINUOUS)

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> AttributeId:
        return self._id

    @property
    def type(self) -> AttributeType:
        return self._domain.attr_type

    @property
    def domain(self) -> AttributeDomain:
        return self._domain

    @property
    def is_nominal(self) -> bool:
        return isinstance(self._domain, NominalDomain)

    @property
    def is_continuous(self) -> bool:
        return isinstance(self._domain, ContinuousDomain)

    @property
    def num_values(self) -> int:
        """Size of the nominal domain (0 for continuous attributes)."""
        return len(self._domain)

    @property
    def nominal_values(self) -> Tuple[str, ...]:
        """Value names in value-id order (empty for continuous attributes)."""
        if isinstance(self._domain, NominalDomain):
            return self._domain.values
        return ()

    def _nominal_domain(self) -> NominalDomain:
        if not isinstance(self._domain, NominalDomain):
            raise TypeMismatchError(
                f"Attribute '{self._name}' is continuous and has no nominal values"
            )
        return self._domain

    def nominal_value_id(self, value_name: str) -> ValueId:
        """
        Get the id of a nominal value.

        Args:
            value_name: Name of the value in this attribute's domain

        Returns:
            Dense value id (position in the domain)

        Raises:
            UnknownValueError: if value_name is not in the domain
            TypeMismatchError: if the attribute is continuous
        """
        domain = self._nominal_domain()
        try:
            return domain.index[value_name]
        except (KeyError, TypeError) as err:
            raise UnknownValueError(
                f"Value '{value_name}' is not in the domain of attribute '{self._name}'"
            ) from err

    def nominal_value_name(self, value_id: ValueId) -> str:
        """
        Get the name of a nominal value from its id.

        Raises:
            InvalidValueIdError: if value_id is outside [0, num_values)
            TypeMismatchError: if the attribute is continuous
        """
        domain = self._nominal_domain()
        if not 0 <= value_id < len(domain.values):
            raise InvalidValueIdError(
                f"Value id {value_id} out of range for attribute '{self._name}' "
                f"with {len(domain.values)} values"
            )
        return domain.values[value_id]

    def nominal_value_map(self) -> Mapping[str, ValueId]:
        """Read-only value name -> value id mapping, in id order."""
        return self._nominal_domain().index

    def to_dict(self) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            "name": self._name,
            "id": self._id,
            "type": self.type.value,
        }
        if self.is_nominal:
            entry["values"] = dict(self._nominal_domain().index)
        return entry

    def __repr__(self):
        if self.is_nominal:
            return (f"Attribute(name={self._name!r}, id={self._id}, "
                    f"type=nominal, values={list(self.nominal_values)})")
        return f"Attribute(name={self._name!r}, id={self._id}, type=continuous)"
