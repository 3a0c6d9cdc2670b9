"""
Example script for building and querying an attribute set.

This script demonstrates how a dataset loader would register the schema of
a small weather dataset, designate the class attribute, and how learning code
would then translate raw rows into numeric vectors.
"""

import logging

from tabschema import AttributeSet, AttributeType, InstanceEncoder, configure_logging

logger = logging.getLogger(__name__)


def build_weather_schema() -> AttributeSet:
    """Register the attributes of the classic 'play tennis' dataset."""
    aset = AttributeSet()
    aset.add_attribute("outlook", AttributeType.NOMINAL, ["sunny", "overcast", "rainy"])
    aset.add_attribute("temperature", AttributeType.CONTINUOUS)
    aset.add_attribute("humidity", AttributeType.CONTINUOUS)
    aset.add_attribute("windy", AttributeType.NOMINAL, ["TRUE", "FALSE"])
    aset.add_attribute("play", AttributeType.NOMINAL, ["yes", "no"])
    aset.set_class("play")
    return aset


def encode_rows_example():
    aset = build_weather_schema()
    print(aset.report())

    encoder = InstanceEncoder(aset)
    rows = [
        ["sunny", "85", "85", "FALSE", "no"],
        ["overcast", "83", "?", "FALSE", "yes"],
        {"outlook": "rainy", "temperature": 70, "windy": "TRUE", "play": "no"},
    ]
    data = encoder.encode_many(rows)
    print(data)

    for vector in data:
        features, label = encoder.split(vector)
        logger.info("features=%s class=%s", features.tolist(),
                    aset.get_nominal_value_name(aset.class_attr_id, label))
        print(encoder.decode(vector))


if __name__ == "__main__":
    configure_logging(level=logging.DEBUG, force_format="plain")
    encode_rows_example()
