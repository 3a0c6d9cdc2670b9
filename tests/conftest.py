from __future__ import annotations

import pytest

from tabschema import AttributeSet, AttributeType


@pytest.fixture
def weather() -> AttributeSet:
    aset = AttributeSet()
    aset.add_attribute("outlook", AttributeType.NOMINAL, ["sunny", "overcast", "rainy"])
    aset.add_attribute("temperature", AttributeType.CONTINUOUS)
    aset.add_attribute("windy", AttributeType.NOMINAL, ["TRUE", "FALSE"])
    aset.add_attribute("play", AttributeType.NOMINAL, ["yes", "no"])
    return aset
