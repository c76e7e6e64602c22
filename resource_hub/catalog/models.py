"""Resource catalog data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DifficultyLevel(str, Enum):
    """Difficulty level of a support resource."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# Fields every catalog record must carry
REQUIRED_FIELDS = (
    "id",
    "title",
    "type",
    "url",
    "description",
    "tags",
    "difficulty_level",
)


@dataclass(frozen=True)
class ResourceItem:
    """A support resource from the catalog.

    Attributes:
        id: Unique identifier within the catalog
        title: Display title
        type: Format label (video, article, blog, audio, tool, ...)
        url: Content locator, opaque to scoring
        description: Free-text summary
        tags: Theme labels in catalog order
        difficulty_level: beginner, intermediate or advanced
    """

    id: int
    title: str
    type: str
    url: str
    description: str
    tags: tuple[str, ...]
    difficulty_level: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResourceItem":
        """Create a ResourceItem from a catalog record."""
        return cls(
            id=int(data["id"]),
            title=str(data["title"]),
            type=str(data["type"]),
            url=str(data["url"]),
            description=str(data["description"]),
            tags=tuple(str(tag) for tag in data["tags"]),
            difficulty_level=str(data["difficulty_level"]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the catalog record representation."""
        return {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "url": self.url,
            "description": self.description,
            "tags": list(self.tags),
            "difficulty_level": self.difficulty_level,
        }
