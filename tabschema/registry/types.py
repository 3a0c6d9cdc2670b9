from typing import Tuple, Union

import numpy as np

AttributeId = int
ValueId = int
AttributeKey = Union[str, AttributeId]
Instance = Tuple[np.ndarray, int]  # (x, y), x shape (m - 1,)
