# ============================================================================
# SCHEMA FILE WRITER
# ============================================================================
# EPOCH: 1 - SCHEMA GENERATION
# STATUS: Generate - Output directory management
# PURPOSE: Write rendered units under the output directory
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema File Writer

Layout under the output directory:

    <out>/
    ├── constants.ts
    ├── types.ts
    ├── tables/
    │   ├── index.ts
    │   └── users/
    │       ├── index.ts
    │       └── schema.ts
    ├── views/ ...
    └── materialized_views/ ...

Directories are created as needed. clean() removes only what the
generator writes: the per-kind folders and the two top-level files.
"""

import logging
import shutil
from pathlib import Path
from typing import Dict, List, Union

from core.contracts import RELATION_KIND_FOLDERS, RelationKind

logger = logging.getLogger(__name__)

TOP_LEVEL_FILES = ("constants.ts", "types.ts")


class SchemaFileWriter:
    """
    Writes generated TypeScript to disk.

    Usage:
        writer = SchemaFileWriter("./zod-schemas")
        writer.write_table(RelationKind.TABLE, "users", {"schema.ts": "..."})
    """

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)
        self.written: List[Path] = []

    @staticmethod
    def kind_folder(kind: RelationKind) -> str:
        return RELATION_KIND_FOLDERS.get(RelationKind.parse(kind), "unknown")

    def table_dir(self, kind: RelationKind, table_name: str) -> Path:
        return self.output_dir / self.kind_folder(kind) / table_name

    def write_file(self, path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        self.written.append(path)
        logger.debug(f"Generated {path}")
        return path

    def write_table(self, kind: RelationKind, table_name: str, files: Dict[str, str]) -> List[Path]:
        """Write every rendered unit of one relation into its folder."""
        folder = self.table_dir(kind, table_name)
        return [self.write_file(folder / name, content) for name, content in files.items()]

    def write_kind_index(self, kind: RelationKind, content: str) -> Path:
        return self.write_file(self.output_dir / self.kind_folder(kind) / "index.ts", content)

    def write_top_level(self, name: str, content: str) -> Path:
        return self.write_file(self.output_dir / name, content)

    def clean(self) -> None:
        """Remove previously generated output; other files are left alone."""
        removed = 0
        for folder in set(RELATION_KIND_FOLDERS.values()):
            path = self.output_dir / folder
            if path.is_dir():
                shutil.rmtree(path)
                removed += 1
        for name in TOP_LEVEL_FILES:
            path = self.output_dir / name
            if path.is_file():
                path.unlink()
                removed += 1

        if removed:
            logger.info(f"Cleaned {removed} generated entries in {self.output_dir}")


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = ["SchemaFileWriter", "TOP_LEVEL_FILES"]
