"""Node models."""

from pydantic import BaseModel, ConfigDict, Field

from kubeskew.constants.enums import NodeStatus


class NodeInfo(BaseModel):
    """Read-only view of a cluster node as seen in the snapshot."""

    model_config = ConfigDict(frozen=True)

    name: str
    labels: dict[str, str] = Field(default_factory=dict)
    status: NodeStatus = NodeStatus.UNKNOWN
    is_ready: bool = False

    def domain(self, topology_key: str) -> str | None:
        """Return the node's value for ``topology_key`` or None when unlabeled."""
        return self.labels.get(topology_key)

    def matches_labels(self, label_filter: dict[str, str]) -> bool:
        """Return True when every filter entry is present on the node."""
        return all(self.labels.get(key) == value for key, value in label_filter.items())
