# models/article.py
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 date or date-time. A trailing Z and offset-less values are UTC.
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass
class Article:
    slug: str
    title: str
    content: str
    category: str
    created_at: str
    order: int = 0
    updated_at: Optional[str] = None
    is_published: bool = False

    @classmethod
    def from_dict(cls, record: dict) -> "Article":
        return cls(
            slug=record["slug"],
            title=record["title"],
            content=record["content"],
            category=record["category"],
            created_at=record["createdAt"],
            order=int(record.get("order") or 0),
            updated_at=record.get("updatedAt") or None,
            is_published=bool(record.get("isPublished", False)),
        )

    @property
    def created(self) -> datetime:
        return parse_timestamp(self.created_at)

    @property
    def updated(self) -> Optional[datetime]:
        return parse_timestamp(self.updated_at) if self.updated_at else None

    @property
    def last_modified(self) -> str:
        return self.updated_at or self.created_at

    @property
    def url_path(self) -> str:
        return f"/learn/{self.slug}/"
