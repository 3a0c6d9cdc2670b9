"""
Numeric encoding of dataset rows through an AttributeSet.

This module translates between raw textual rows and the dense float vectors
used by learning code: nominal cells become their value id, continuous cells
their float value, and missing cells NaN.
"""

import math
from typing import Any, List, Mapping, Optional, Sequence, Union

import numpy as np

from ..registry.attribute import Attribute
from ..registry.attribute_set import AttributeSet
from ..registry.errors import (
    InvalidValueIdError,
    TypeMismatchError,
    UnknownAttributeNameError
)
from ..registry.types import Instance

Row = Union[Sequence[Any], Mapping[str, Any]]


class InstanceEncoder:
    """
    Encoder/decoder of rows for a given attribute set.

    Column i of an encoded vector holds attribute id i. The attribute set is
    read on every call, so attributes added later are picked up.
    """

    def __init__(self, attribute_set: AttributeSet, missing: str = "?"):
        """
        Initialize encoder.

        Args:
            attribute_set: Schema used for the translation
            missing: Cell marker for a missing value (None is always missing)
        """
        self.attribute_set = attribute_set
        self.missing = missing

    def _is_missing(self, cell: Any) -> bool:
        if cell is None:
            return True
        if isinstance(cell, str):
            return cell == self.missing
        return isinstance(cell, float) and math.isnan(cell)

    def _encode_cell(self, attr: Attribute, cell: Any) -> float:
        if self._is_missing(cell):
            return np.nan
        if attr.is_nominal:
            return float(attr.nominal_value_id(cell))
        try:
            return float(cell)
        except (TypeError, ValueError) as err:
            raise ValueError(
                f"Continuous attribute '{attr.name}' got non-numeric value {cell!r}"
            ) from err

    def _cells(self, row: Row) -> List[Any]:
        attributes = self.attribute_set.attributes
        if isinstance(row, Mapping):
            for name in row:
                if name not in self.attribute_set:
                    raise UnknownAttributeNameError(f"Unknown attribute '{name}'")
            return [row.get(attr.name) for attr in attributes]

        cells = list(row)
        if len(cells) != len(attributes):
            raise ValueError(
                f"Row has {len(cells)} cells, expected {len(attributes)}"
            )
        return cells

    def encode(self, row: Row) -> np.ndarray:
        """
        Encode one row.

        Args:
            row: Cells in attribute-id order, or a mapping attribute name -> cell
                 (absent names are treated as missing)

        Returns:
            float64 vector of shape (num_attributes,)

        Raises:
            UnknownValueError: nominal cell outside the attribute's domain
            UnknownAttributeNameError: mapping key not in the attribute set
            ValueError: wrong row length or non-numeric continuous cell
        """
        attributes = self.attribute_set.attributes
        cells = self._cells(row)
        return np.array(
            [self._encode_cell(attr, cell) for attr, cell in zip(attributes, cells)],
            dtype=np.float64
        )

    def encode_many(self, rows: Sequence[Row]) -> np.ndarray:
        """Encode rows into an array of shape (n_rows, num_attributes)."""
        if len(rows) == 0:
            return np.empty((0, self.attribute_set.num_attributes), dtype=np.float64)
        return np.vstack([self.encode(row) for row in rows])

    def decode(self, vector: Sequence[float]) -> List[Optional[Union[str, float]]]:
        """
        Decode an encoded vector back to cell values.

        Returns:
            List in attribute-id order: value names for nominal attributes,
            floats for continuous ones, None for missing cells

        Raises:
            InvalidValueIdError: nominal cell that is not a valid value id
            ValueError: vector length differs from num_attributes
        """
        vector = np.asarray(vector, dtype=np.float64)
        attributes = self.attribute_set.attributes
        if vector.shape != (len(attributes),):
            raise ValueError(
                f"Vector has shape {vector.shape}, expected ({len(attributes)},)"
            )

        decoded: List[Optional[Union[str, float]]] = []
        for attr, value in zip(attributes, vector):
            if np.isnan(value):
                decoded.append(None)
            elif attr.is_nominal:
                if not float(value).is_integer():
                    raise InvalidValueIdError(
                        f"Value id {value} of attribute '{attr.name}' is not an integer"
                    )
                decoded.append(attr.nominal_value_name(int(value)))
            else:
                decoded.append(float(value))
        return decoded

    def split(self, vector: Sequence[float]) -> Instance:
        """
        Split an encoded vector into features and class label.

        Returns:
            Tuple of (feature vector without the class column, class value id)

        Raises:
            NoClassAttributeError: no class attribute designated
            TypeMismatchError: class attribute is continuous
            InvalidValueIdError: class cell is not a value id of the class domain
            ValueError: class value is missing
        """
        class_attr = self.attribute_set.class_attribute
        if not class_attr.is_nominal:
            raise TypeMismatchError(
                f"Class attribute '{class_attr.name}' is continuous"
            )
        class_id = self.attribute_set.class_attr_id

        vector = np.asarray(vector, dtype=np.float64)
        label = vector[class_id]
        if np.isnan(label):
            raise ValueError("Class value is missing")
        if not float(label).is_integer():
            raise InvalidValueIdError(
                f"Class value id {label} of attribute '{class_attr.name}' is not an integer"
            )
        # raises InvalidValueIdError outside the class domain
        class_attr.nominal_value_name(int(label))
        return np.delete(vector, class_id), int(label)
