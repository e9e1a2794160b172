"""
Datasets package public API.

Re-export the dataset generators so callers can write:
    from sortcompare.datasets import make_dataset, generate, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, generate, make_dataset

__all__ = ["make_dataset", "generate", "SUPPORTED_DISTS"]
