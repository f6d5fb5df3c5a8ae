from __future__ import annotations

"""Metadata document parsed from ``ormbfile.yaml``.

The archiving core never looks inside this document; it is carried as-is into
:class:`engine.contracts.saved_model.SavedModel`. Fields are optional and
unknown keys are kept, since checking model semantics is up to the consumer.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _OpenModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Metric(_OpenModel):
    name: str
    value: Optional[Any] = None


class Hyperparameter(_OpenModel):
    name: str
    value: Optional[Any] = None


class Tensor(_OpenModel):
    name: Optional[str] = None
    size: Optional[List[int]] = None
    dtype: Optional[str] = Field(default=None, alias="dType")
    opt: Optional[Any] = None


class Layer(_OpenModel):
    name: Optional[str] = None


class Signature(_OpenModel):
    inputs: List[Tensor] = Field(default_factory=list)
    outputs: List[Tensor] = Field(default_factory=list)
    layers: List[Layer] = Field(default_factory=list)


class GitRepo(_OpenModel):
    repository: Optional[str] = None
    revision: Optional[str] = None


class Training(_OpenModel):
    git: Optional[GitRepo] = None


class Dataset(_OpenModel):
    git: Optional[GitRepo] = None


class Metadata(_OpenModel):
    """Structured view of ``ormbfile.yaml``."""

    author: Optional[str] = None
    created: Optional[datetime] = None
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    labels: Dict[str, Any] = Field(default_factory=dict)

    format: Optional[str] = None
    framework: Optional[str] = None

    metrics: List[Metric] = Field(default_factory=list)
    hyperparameters: List[Hyperparameter] = Field(default_factory=list)
    signature: Optional[Signature] = None

    training: Optional[Training] = None
    dataset: Optional[Dataset] = None
