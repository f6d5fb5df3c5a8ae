from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ModelPathRequest(BaseModel):
    path: str = Field(..., min_length=1)  # model directory, relative to the served root


class SaveModelRequest(ModelPathRequest):
    filename: Optional[str] = None  # optional client-suggested name (e.g., "resnet.tar.gz")


class InspectModelResponse(BaseModel):
    path: str
    metadata: Dict[str, Any]
    size: int
    digest: str
    files: List[str]
