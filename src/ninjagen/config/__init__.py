"""Project description parsing for ninjagen."""

from .project_config import BlobSpec, LinkSpec, ProjectConfig, ProjectConfigError, SubninjaSpec

__all__ = [
    "ProjectConfig",
    "ProjectConfigError",
    "BlobSpec",
    "LinkSpec",
    "SubninjaSpec",
]
