"""Route search and traffic distribution parameters."""

from dataclasses import dataclass


@dataclass
class RoutingConfig:
    """Configuration for path finding and traffic distribution."""

    # Alternative path search
    default_alternatives: int = 3  # k when the caller does not give one

    # Traffic distribution
    default_distribution_paths: int = 3  # Candidate routes per distribution plan

    def __post_init__(self):
        if self.default_alternatives < 1:
            raise ValueError("default_alternatives must be at least 1")
        if self.default_distribution_paths < 1:
            raise ValueError("default_distribution_paths must be at least 1")
