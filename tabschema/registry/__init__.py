"""
Attribute registry for tabular learning datasets.

This package provides the schema data model: attributes with nominal or
continuous domains, and the ordered AttributeSet that assigns their ids and
designates the class attribute.
"""

from .types import (
    AttributeId,
    ValueId,
    Instance
)

from .domains import (
    AttributeType,
    AttributeDomain,
    NominalDomain,
    ContinuousDomain
)

from .errors import (
    SchemaError,
    InvalidDomainError,
    DuplicateAttributeNameError,
    UnknownAttributeNameError,
    AttributeIdOutOfRangeError,
    UnknownValueError,
    InvalidValueIdError,
    TypeMismatchError,
    NoClassAttributeError
)

from .attribute import Attribute
from .attribute_set import AttributeSet
from .report import SchemaReport

__all__ = [
    'AttributeId',
    'ValueId',
    'Instance',
    'AttributeType',
    'AttributeDomain',
    'NominalDomain',
    'ContinuousDomain',
    'SchemaError',
    'InvalidDomainError',
    'DuplicateAttributeNameError',
    'UnknownAttributeNameError',
    'AttributeIdOutOfRangeError',
    'UnknownValueError',
    'InvalidValueIdError',
    'TypeMismatchError',
    'NoClassAttributeError',
    'Attribute',
    'AttributeSet',
    'SchemaReport'
]
