"""kubectl-topology-skew: pod count and skew per topology domain."""

__version__ = "0.1.0"
