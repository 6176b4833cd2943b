"""Data models for maker submissions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Submission:
    """The slice of a maker's listing that badge verification reads and writes."""

    uuid: str
    name: str = ""
    url: str = ""
    is_verified: bool = False
    is_published: bool = False
    user_type: str | None = None

    def to_hash(self) -> dict[str, str]:
        """Flatten into Redis hash fields (booleans as ``"0"``/``"1"``)."""
        return {
            "uuid": self.uuid,
            "name": self.name,
            "url": self.url,
            "is_verified": "1" if self.is_verified else "0",
            "is_published": "1" if self.is_published else "0",
            "user_type": self.user_type or "",
        }

    @classmethod
    def from_hash(cls, uuid: str, fields: dict[str, str]) -> Submission:
        return cls(
            uuid=fields.get("uuid") or uuid,
            name=fields.get("name", ""),
            url=fields.get("url", ""),
            is_verified=fields.get("is_verified") == "1",
            is_published=fields.get("is_published") == "1",
            user_type=fields.get("user_type") or None,
        )
