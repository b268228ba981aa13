import logging
from pathlib import Path
from typing import Iterable, List, Optional

import frontmatter
import yaml

from pressroom.schemas.content import ContentRecord

logger = logging.getLogger(__name__)

COVER_NAMES = ("cover.jpg", "cover.jpeg", "cover.png", "cover.webp", "cover.gif", "cover.avif")


class FileContentRepo:
    """Reads markdown content files from `<content_dir>/<section>/**`."""

    def __init__(
        self,
        content_dir: Path,
        sections: Iterable[str] = ("blog", "newsletter"),
        pattern: str = "**/*.md",
    ):
        self.content_dir = Path(content_dir)
        self.sections = list(sections)
        self.pattern = pattern

    def list_records(self) -> List[ContentRecord]:
        if not self.content_dir.is_dir():
            raise FileNotFoundError(f"Content directory not found: {self.content_dir}")

        records = []
        for section in self.sections:
            section_dir = self.content_dir / section
            if not section_dir.is_dir():
                logger.warning(f"Skipping missing content section: {section_dir}")
                continue
            for file_path in sorted(section_dir.glob(self.pattern)):
                if file_path.is_file():
                    records.append(self.read_record(file_path))

        logger.debug(f"Discovered {len(records)} content files in {self.content_dir}")
        return records

    def read_record(self, file_path: Path) -> ContentRecord:
        text = file_path.read_text(encoding="utf-8")
        record_path = self._record_path(file_path)

        try:
            parsed = frontmatter.loads(text)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            logger.warning(f"Invalid front matter in {record_path}: {e}")
            return ContentRecord(path=record_path, metadata=None, body=text)

        if not frontmatter.checks(text) or not isinstance(parsed.metadata, dict):
            return ContentRecord(path=record_path, metadata=None, body=parsed.content)

        metadata = dict(parsed.metadata)
        cover = metadata.pop("cover", None) or self._find_cover(file_path)
        return ContentRecord(
            path=record_path,
            metadata=metadata,
            cover=str(cover) if cover else None,
            body=parsed.content,
        )

    def _record_path(self, file_path: Path) -> str:
        relative = file_path.relative_to(self.content_dir).as_posix()
        return f"{self.content_dir.name}/{relative}"

    def _find_cover(self, file_path: Path) -> Optional[str]:
        # Only folder-style posts own their directory
        if file_path.parent.name in self.sections:
            return None
        for name in COVER_NAMES:
            candidate = file_path.parent / name
            if candidate.is_file():
                return candidate.relative_to(self.content_dir).as_posix()
        return None
