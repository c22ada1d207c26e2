"""Manifest entities - the group/subgroup/category tree shown on the setup screen."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass(frozen=True)
class CategoryInfo:
    category_id: str
    title: str
    item_count: int
    # Large lists are studied as a random sample of this many items
    sample_size: Optional[int] = None


@dataclass
class ManifestSubgroup:
    name: str
    categories: List[CategoryInfo] = field(default_factory=list)


@dataclass
class ManifestGroup:
    name: str
    subgroups: List[ManifestSubgroup] = field(default_factory=list)


@dataclass
class CategoryManifest:
    """Catalogue of every fetchable category."""

    groups: List[ManifestGroup] = field(default_factory=list)

    def iter_categories(self) -> Iterator[CategoryInfo]:
        for group in self.groups:
            for subgroup in group.subgroups:
                yield from subgroup.categories

    def find(self, category_id: str) -> Optional[CategoryInfo]:
        for info in self.iter_categories():
            if info.category_id == category_id:
                return info
        return None

    def sample_sizes(self) -> Dict[str, int]:
        return {
            info.category_id: info.sample_size
            for info in self.iter_categories()
            if info.sample_size
        }

    @property
    def total_categories(self) -> int:
        return sum(1 for _ in self.iter_categories())
