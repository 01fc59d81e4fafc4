"""The maven project whose hooks are being installed."""

from __future__ import annotations

import dataclasses
import os
import xml.etree.ElementTree as ET
from pathlib import Path

from mvnhooks.errors import ProjectDescriptorError

__all__ = ["MavenProject", "load_project", "read_artifact_id"]


@dataclasses.dataclass(frozen=True)
class MavenProject:
    """Project descriptor location and identifier."""

    base_dir: Path
    pom_file: Path
    artifact_id: str


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def read_artifact_id(pom_file: Path) -> str:
    """Return the ``artifactId`` declared directly under ``<project>``.

    The parent's ``artifactId`` (inside ``<parent>``) is ignored.
    """
    try:
        root = ET.parse(pom_file).getroot()
    except (OSError, ET.ParseError) as exc:
        raise ProjectDescriptorError(f"Failed to read {pom_file}: {exc}") from exc

    for child in root:
        if _local_name(child.tag) == "artifactId" and child.text and child.text.strip():
            return child.text.strip()

    raise ProjectDescriptorError(f"No artifactId declared in {pom_file}")


def load_project(pom_file: Path, artifact_id: str | None = None) -> MavenProject:
    """Build a ``MavenProject``, reading the artifactId from the pom unless given."""
    pom_file = Path(os.path.abspath(pom_file))
    if artifact_id is None:
        artifact_id = read_artifact_id(pom_file)
    return MavenProject(
        base_dir=pom_file.parent,
        pom_file=pom_file,
        artifact_id=artifact_id,
    )
