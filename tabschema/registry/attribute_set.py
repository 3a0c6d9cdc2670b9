"""
Ordered, append-only registry of attributes.

This module implements the AttributeSet: the list of attributes of a dataset
schema, indexed by position (the attribute id) and by name, plus the
designation of one class (target) attribute.
"""

import logging
import operator
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .attribute import Attribute
from .domains import AttributeType
from .errors import (
    AttributeIdOutOfRangeError,
    DuplicateAttributeNameError,
    NoClassAttributeError,
    UnknownAttributeNameError
)
from .report import SchemaReport
from .types import AttributeId, AttributeKey, ValueId

logger = logging.getLogger(__name__)


class AttributeSet:
    """
    Stores a set of attributes.

    - Position in the backing list is the attribute id; it is the only source
      of truth for id lookups, whatever id an attribute object claims.
    - Names are unique; a duplicate add is rejected and leaves the set as is.
    - Append-only: attributes are never removed, renamed or reordered.

    Not thread-safe. Hosts sharing one set across threads must guard it with
    a single read/write lock (adds and set_class need exclusive access).
    """

    def __init__(self):
        self._attributes: List[Attribute] = []
        self._name_ids: Dict[str, AttributeId] = {}
        self._class_name: Optional[str] = None

    def add_attribute(self,
                      attr: Union[str, Attribute],
                      attr_type: Optional[AttributeType] = None,
                      nominal_values: Optional[Iterable[str]] = None) -> Attribute:
        """
        Add an attribute to the set.

        Either builds a new attribute from (name, type, values), with id equal
        to the current number of attributes, or appends an already constructed
        Attribute.

        Args:
            attr: Attribute name, or a pre-built Attribute
            attr_type: NOMINAL or CONTINUOUS (required with a name)
            nominal_values: Value names for nominal attributes, None otherwise

        Returns:
            The attribute stored in the set

        Raises:
            DuplicateAttributeNameError: if the name is already registered
            InvalidDomainError: if nominal_values does not fit attr_type
        """
        attr_id = len(self._attributes)

        if isinstance(attr, Attribute):
            if attr_type is not None or nominal_values is not None:
                raise TypeError(
                    "attr_type and nominal_values are not accepted with a pre-built Attribute"
                )
            self._check_unique(attr.name)
            if attr.id != attr_id:
                logger.warning(
                    "Attribute '%s' claims id %d but is stored at position %d",
                    attr.name, attr.id, attr_id
                )
            new_attr = attr
        else:
            if attr_type is None:
                raise TypeError(f"Missing attr_type for attribute '{attr}'")
            self._check_unique(attr)
            # build before touching state so a bad domain leaves the set unchanged
            new_attr = Attribute(attr, attr_id, attr_type, nominal_values)

        self._attributes.append(new_attr)
        self._name_ids[new_attr.name] = attr_id
        logger.debug("Added attribute '%s' (%s) with id %d",
                     new_attr.name, new_attr.type.value, attr_id)
        return new_attr

    def _check_unique(self, name: str) -> None:
        if name in self._name_ids:
            raise DuplicateAttributeNameError(
                f"Attribute '{name}' already registered with id {self._name_ids[name]}"
            )

    def get_attribute_by_id(self, attr_id: AttributeId) -> Attribute:
        """
        Get an attribute by its id (position in the set).

        Raises:
            AttributeIdOutOfRangeError: if attr_id is outside [0, num_attributes)
            TypeError: if attr_id is not an integer (bools included)
        """
        if isinstance(attr_id, bool):
            raise TypeError(f"Attribute id must be an integer, got {attr_id!r}")
        attr_id = operator.index(attr_id)
        if not 0 <= attr_id < len(self._attributes):
            raise AttributeIdOutOfRangeError(
                f"Attribute id {attr_id} out of range [0, {len(self._attributes)})"
            )
        return self._attributes[attr_id]

    def get_attribute_by_name(self, name: str) -> Attribute:
        """
        Get an attribute by its name.

        Raises:
            UnknownAttributeNameError: if no attribute has this name
        """
        return self._attributes[self._resolve_name(name)]

    def _resolve_name(self, name: str) -> AttributeId:
        try:
            return self._name_ids[name]
        except (KeyError, TypeError) as err:
            raise UnknownAttributeNameError(f"Unknown attribute '{name}'") from err

    def get_attribute(self, key: AttributeKey) -> Attribute:
        """Get an attribute by name (str) or id (int)."""
        if isinstance(key, str):
            return self.get_attribute_by_name(key)
        return self.get_attribute_by_id(key)

    def get_nominal_value_id(self, attr: AttributeKey, value_name: str) -> ValueId:
        """
        Get the value id of a nominal value of an attribute.

        Args:
            attr: Attribute name or id
            value_name: Nominal value name

        Returns:
            The value id within that attribute's domain

        Raises:
            UnknownAttributeNameError / AttributeIdOutOfRangeError: unknown attribute
            UnknownValueError: value not in the domain
            TypeMismatchError: attribute is continuous
        """
        return self.get_attribute(attr).nominal_value_id(value_name)

    def get_nominal_value_name(self, attr: AttributeKey, value_id: ValueId) -> str:
        """Reverse of get_nominal_value_id()."""
        return self.get_attribute(attr).nominal_value_name(value_id)

    @property
    def num_attributes(self) -> int:
        return len(self._attributes)

    @property
    def attributes(self) -> Tuple[Attribute, ...]:
        """All attributes in id order (read-only snapshot)."""
        return tuple(self._attributes)

    def names(self) -> List[str]:
        return [attr.name for attr in self._attributes]

    def set_class(self, name: str) -> None:
        """
        Designate the class ("concept") attribute.

        Raises:
            UnknownAttributeNameError: if name is not registered
        """
        if name not in self._name_ids:
            raise UnknownAttributeNameError(
                f"Trying to set an invalid attribute, '{name}', as the class attribute"
            )
        self._class_name = name
        logger.debug("Class attribute set to '%s' (id %d)", name, self._name_ids[name])

    def has_class(self) -> bool:
        return self._class_name is not None

    @property
    def class_attr_name(self) -> str:
        """
        Name of the class attribute.

        Raises:
            NoClassAttributeError: if set_class() was never called
        """
        if self._class_name is None:
            raise NoClassAttributeError("No class attribute has been set")
        return self._class_name

    @property
    def class_attr_id(self) -> AttributeId:
        return self._name_ids[self.class_attr_name]

    @property
    def class_attribute(self) -> Attribute:
        return self._attributes[self.class_attr_id]

    def feature_attributes(self) -> List[Attribute]:
        """All attributes except the class attribute, in id order."""
        return [attr for attr in self._attributes if attr.name != self._class_name]

    def contains(self, name: str) -> bool:
        """Whether an attribute with this name is registered."""
        try:
            return name in self._name_ids
        except TypeError:
            return False

    def report(self) -> SchemaReport:
        """Structured outline of all attributes and their value ids."""
        return SchemaReport.from_attribute_set(self)

    def __contains__(self, name) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self._attributes)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._attributes)

    def __repr__(self):
        return (f"AttributeSet(num_attributes={len(self._attributes)}, "
                f"class_attribute={self._class_name!r})")
