"""
Default content handed to the study browser before any persisted data exists.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Tuple

from . import resources
from .data_source import Article, Reference

logger = logging.getLogger(__name__)

ARTICLE_CHARACTER_TABLES = "article-character-tables.txt"

# Declaration order is the order articles are served in
SEED = [
    {
        "id": "character-tables",
        "title": "Techniques for constructing character tables",
        "resource": ARTICLE_CHARACTER_TABLES,
    },
]


@dataclass(frozen=True)
class SeedSnapshot:
    articles: Tuple[Article, ...] = ()
    references: Tuple[Reference, ...] = ()

    def to_dict(self):
        return {
            "articles": [a.to_dict() for a in self.articles],
            "references": [r.to_dict() for r in self.references],
        }


def get_seed(load_text: Callable[[str], str] = resources.load_text) -> SeedSnapshot:
    """Build a fresh snapshot of the seed articles; references start empty."""
    articles = []
    seen = set()
    for item in SEED:
        if item["id"] in seen:
            raise ValueError(f"Duplicate seed article id: {item['id']}")
        seen.add(item["id"])
        articles.append(Article(
            id=item["id"],
            title=item["title"],
            text=load_text(item["resource"]),
        ))

    logger.debug("Built seed snapshot with %d articles", len(articles))
    return SeedSnapshot(articles=tuple(articles), references=())
