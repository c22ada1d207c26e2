"""Category Source - parses word list and manifest JSON files."""

import json
import logging
from pathlib import Path
from typing import List

from kotoba_quiz.core import (
    CategoryInfo,
    CategoryManifest,
    FetchError,
    ManifestGroup,
    ManifestSubgroup,
    ParseError,
    VocabItem,
)

logger = logging.getLogger(__name__)


class CategorySource:
    """Data Factory responsible for reading word lists from a data directory.

    Layout:
        <data_dir>/manifest.json          category tree for the setup screen
        <data_dir>/<category_id>.json     one JSON array of entries per category

    Entry keys follow the published word lists: `kanji`, `kana`, `romaji`,
    `chinese`, `example`, `example_chinese`. Only `kanji` and `kana` are required.

    Manifest categories carry `id`, `title`, `count` and an optional `sample`:
    the number of random items a session takes from a large list.
    """

    MANIFEST_FILENAME = "manifest.json"

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def fetch_category(self, category_id: str) -> List[VocabItem]:
        """Load the entries of one category in source order.

        Raises:
            FetchError: If the category file is missing or unreadable.
            ParseError: If the file is not a JSON array of valid entries.
        """
        path = self._category_path(category_id)
        data = self._read_json(path, category_id)

        if not isinstance(data, list):
            raise ParseError(category_id, "word list must be a JSON array")

        items = [self._parse_entry(category_id, idx, entry) for idx, entry in enumerate(data)]
        logger.debug("Loaded %d items from category %s", len(items), category_id)
        return items

    def fetch_manifest(self) -> CategoryManifest:
        """Load the category tree.

        Raises:
            FetchError: If manifest.json is missing or unreadable.
            ParseError: If the manifest structure is invalid.
        """
        path = self.data_dir / self.MANIFEST_FILENAME
        data = self._read_json(path, self.MANIFEST_FILENAME)

        try:
            groups = []
            for group_data in data["groups"]:
                subgroups = []
                for subgroup_data in group_data.get("subgroups", []):
                    categories = [
                        CategoryInfo(
                            category_id=str(cat["id"]),
                            title=str(cat.get("title", cat["id"])),
                            item_count=int(cat.get("count", 0)),
                            sample_size=_sample_size(cat.get("sample")),
                        )
                        for cat in subgroup_data.get("categories", [])
                    ]
                    subgroups.append(
                        ManifestSubgroup(name=str(subgroup_data["name"]), categories=categories)
                    )
                groups.append(ManifestGroup(name=str(group_data["name"]), subgroups=subgroups))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ParseError(self.MANIFEST_FILENAME, f"invalid manifest structure: {e}") from e

        return CategoryManifest(groups=groups)

    def _category_path(self, category_id: str) -> Path:
        # Category ids are file stems; reject anything that would escape data_dir
        if not category_id or "/" in category_id or "\\" in category_id or category_id.startswith("."):
            raise FetchError(category_id, "invalid category id")
        return self.data_dir / f"{category_id}.json"

    @staticmethod
    def _read_json(path: Path, source: str):
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise FetchError(source, f"cannot read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise ParseError(source, f"{path} is not valid UTF-8: {e}") from e

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParseError(source, f"invalid JSON in {path}: {e}") from e

    @staticmethod
    def _parse_entry(category_id: str, index: int, entry) -> VocabItem:
        if not isinstance(entry, dict):
            raise ParseError(category_id, f"entry {index} is not an object")

        headword = entry.get("kanji")
        reading = entry.get("kana")
        if not isinstance(headword, str) or not headword:
            raise ParseError(category_id, f"entry {index} has no 'kanji'")
        if not isinstance(reading, str):
            raise ParseError(category_id, f"entry {index} has no 'kana'")

        return VocabItem(
            headword=headword,
            reading=reading,
            romanization=_optional_text(entry.get("romaji")),
            translation=_optional_text(entry.get("chinese")),
            example_target=_optional_text(entry.get("example")),
            example_translation=_optional_text(entry.get("example_chinese")),
        )


def _sample_size(value) -> int | None:
    if value is None:
        return None
    size = int(value)
    if size < 1:
        raise ValueError(f"sample must be positive, got {size}")
    return size


def _optional_text(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
