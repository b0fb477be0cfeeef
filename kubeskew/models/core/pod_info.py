"""Pod models."""

from pydantic import BaseModel, ConfigDict

from kubeskew.constants.enums import PodPhase


class PodInfo(BaseModel):
    """Read-only view of a workload pod."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = ""
    phase: str | None = None
    node_name: str | None = None
    @property
    def is_running(self) -> bool:
        return self.phase == PodPhase.RUNNING.value
