"""
Batch Corrections Package

One-shot jobs repairing existing rows. Kept apart from the migration log: a
correction changes data, never schema.
"""

from .base import BatchCorrection, CorrectionReport
from .resources import ResourceTypeCorrection, ResourceUrlCorrection, normalize_url

CORRECTIONS = {
    ResourceTypeCorrection.name: ResourceTypeCorrection,
    ResourceUrlCorrection.name: ResourceUrlCorrection,
}

__all__ = [
    'BatchCorrection',
    'CorrectionReport',
    'ResourceTypeCorrection',
    'ResourceUrlCorrection',
    'normalize_url',
    'CORRECTIONS',
]
