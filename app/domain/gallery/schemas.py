"""Gallery schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.schemas import UTCResponse
from ...shared.sanitization import sanitize_text


class GalleryImageCreate(BaseModel):
    """Metadata for an image already hosted at ``url``"""

    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v):
        v = v.strip()
        if not (v.startswith("https://") or v.startswith("http://") or v.startswith("/")):
            raise ValueError("URL da imagem inválida")
        return v

    @field_validator("title")
    @classmethod
    def sanitize_title(cls, v):
        return sanitize_text(v, max_length=255)

    @field_validator("category")
    @classmethod
    def sanitize_category(cls, v):
        return sanitize_text(v, max_length=100)

    @field_validator("description")
    @classmethod
    def sanitize_description(cls, v):
        return sanitize_text(v, max_length=1000)


class GalleryImageResponse(UTCResponse):
    id: str
    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    createdAt: Optional[datetime] = None

    @classmethod
    def from_model(cls, image) -> "GalleryImageResponse":
        return cls(
            id=image.id,
            url=image.url,
            title=image.title,
            description=image.description,
            category=image.category,
            createdAt=image.created_at,
        )
