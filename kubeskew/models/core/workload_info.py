"""Workload selector models."""

from pydantic import BaseModel, ConfigDict


class WorkloadSelector(BaseModel):
    """Identity and label selector derived from one workload object."""

    model_config = ConfigDict(frozen=True)

    identity: str
    selector: str
