"""
Exceptions raised by the attribute registry.

Every error is a caller-input error, raised at the offending call. Each class
also derives from the builtin exception that matches its lookup semantics, so
``except KeyError`` / ``except IndexError`` keep working for callers that do
not import this module.
"""


class SchemaError(Exception):
    """Base exception for all tabschema errors"""
    pass


class InvalidDomainError(SchemaError, ValueError):
    """Value list does not fit the attribute type (empty nominal, valued continuous, duplicates)"""
    pass


class DuplicateAttributeNameError(SchemaError, ValueError):
    """An attribute with the same name is already registered"""
    pass


class UnknownAttributeNameError(SchemaError, KeyError):
    """No attribute with the given name is registered"""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class AttributeIdOutOfRangeError(SchemaError, IndexError):
    """Attribute id outside [0, num_attributes)"""
    pass


class UnknownValueError(SchemaError, KeyError):
    """Value name is not part of the attribute's nominal domain"""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class InvalidValueIdError(SchemaError, IndexError):
    """Value id outside [0, num_values)"""
    pass


class TypeMismatchError(UnknownValueError, InvalidValueIdError, TypeError):
    """
    Nominal value lookup on a continuous attribute.

    Derives from both value lookup errors: a continuous attribute has no
    domain, so every name is unknown and every id is invalid.
    """
    pass


class NoClassAttributeError(SchemaError, LookupError):
    """Class attribute accessed before any set_class() call"""
    pass
