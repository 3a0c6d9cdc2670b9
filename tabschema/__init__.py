"""
tabschema: attribute registry for tabular learning datasets.
"""

from .registry import (
    Attribute,
    AttributeSet,
    AttributeType,
    NominalDomain,
    ContinuousDomain,
    SchemaReport,
    SchemaError,
    InvalidDomainError,
    DuplicateAttributeNameError,
    UnknownAttributeNameError,
    AttributeIdOutOfRangeError,
    UnknownValueError,
    InvalidValueIdError,
    TypeMismatchError,
    NoClassAttributeError,
    AttributeId,
    ValueId,
    Instance,
)
from .adapters import InstanceEncoder
from .logging_config import configure_logging

__all__ = [
    "Attribute",
    "AttributeSet",
    "AttributeType",
    "NominalDomain",
    "ContinuousDomain",
    "SchemaReport",
    "SchemaError",
    "InvalidDomainError",
    "DuplicateAttributeNameError",
    "UnknownAttributeNameError",
    "AttributeIdOutOfRangeError",
    "UnknownValueError",
    "InvalidValueIdError",
    "TypeMismatchError",
    "NoClassAttributeError",
    "AttributeId",
    "ValueId",
    "Instance",
    "InstanceEncoder",
    "configure_logging",
]
