from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class DocumentType(str, Enum):
    """Fixed document taxonomy. Values are what gets stored in the type column."""

    TDS = "TDS"
    ESR = "ESR"
    MSDS = "MSDS"
    LEED = "LEED"
    INSTALLATION = "Installation"
    WARRANTY = "Warranty"
    ACOUSTIC = "Acoustic"
    PART_SPEC = "PartSpec"

    @classmethod
    def _missing_(cls, value: object) -> "DocumentType | None":
        # Older rows stored "warranty" in lowercase.
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None

    def __str__(self) -> str:
        return self.value


@dataclass
class DocumentRecord:
    """A persisted document row (metadata only, no payload)."""

    id: str
    name: str
    description: str
    filename: str
    size: int
    type: DocumentType
    product_type: str
    required: bool = False
    products: list[str] = field(default_factory=list)
    created_at: datetime | None = None


@dataclass(frozen=True)
class NewDocument:
    """A validated upload ready to be inserted. Owns its payload until persisted."""

    name: str
    description: str
    filename: str
    type: DocumentType
    product_type: str
    file_data: bytes
    required: bool = False
    products: tuple[str, ...] = ()

    @property
    def size(self) -> int:
        return len(self.file_data)

    def to_fields(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "filename": self.filename,
            "file_data": self.file_data,
            "size": self.size,
            "type": self.type.value,
            "required": self.required,
            "products": list(self.products),
            "product_type": self.product_type,
        }


UPDATABLE_FIELDS = frozenset({"name", "description", "type", "products"})
