"""Shared schema contracts.

Pydantic models used to validate documents that cross the engine/backend
boundary.
"""

from .metadata import (
    Dataset,
    GitRepo,
    Hyperparameter,
    Layer,
    Metadata,
    Metric,
    Signature,
    Tensor,
    Training,
)

__all__ = [
    "Metadata",
    "Metric",
    "Hyperparameter",
    "Signature",
    "Tensor",
    "Layer",
    "GitRepo",
    "Training",
    "Dataset",
]
