"""
Adapters between an AttributeSet and numeric feature vectors.
"""

from .encoder import InstanceEncoder

__all__ = [
    'InstanceEncoder'
]
