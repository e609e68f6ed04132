from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


CATEGORIES = ["abaya", "jallabiya", "tshirt", "handbag"]

# Fields an admin may write; id and timestamps belong to the backend.
WRITABLE_FIELDS = ("name", "description", "price", "image_url", "category")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    # PostgREST returns "+00:00" offsets, older rows may carry a trailing "Z".
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    description: str
    price: float
    image_url: str
    category: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Product":
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            description=row.get("description") or "",
            price=row.get("price") or 0,
            image_url=row.get("image_url") or "",
            category=row.get("category") or "",
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )
