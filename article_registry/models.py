"""
Data models for article records and the persisted document.

Article inputs are decoded with pydantic so that request bodies and the
stored document share one structural definition. Optional fields stay
optional: an absent list is not defaulted to an empty one.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class ArticleFields(BaseModel):
    """An article without its identifier, as submitted on creation."""

    model_config = ConfigDict(extra="ignore")

    authors: str
    title: Optional[str] = None
    doi: Optional[str] = None
    keywords: Optional[List[str]] = None
    models: Optional[List[str]] = None
    techniques: Optional[List[str]] = None
    results: Optional[List[str]] = None
    notes: Optional[str] = None

    def with_id(self, article_id: int) -> "Article":
        """Build the full Article carrying the given identifier."""
        data = self.model_dump(exclude_none=True)
        data["id"] = article_id
        return Article(**data)


class Article(ArticleFields):
    """A stored bibliographic record."""

    id: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the id first and absent optional fields omitted."""
        data = self.model_dump(exclude_none=True)
        return {"id": data.pop("id"), **data}


class Document(BaseModel):
    """The whole persisted collection: ``{"articles": [...]}``."""

    articles: List[Article] = Field(default_factory=list)
    _complete: bool = PrivateAttr(default=True)

    @classmethod
    def empty(cls) -> "Document":
        """Return a document with no articles."""
        return cls(articles=[])

    @property
    def is_complete(self) -> bool:
        """False when stored records were skipped while decoding."""
        return self._complete

    def mark_incomplete(self) -> None:
        self._complete = False

    def next_id(self) -> int:
        """Return the identifier the next created article receives."""
        return max((article.id for article in self.articles), default=0) + 1

    def find_index(self, article_id: int) -> Optional[int]:
        """Return the position of the article with the given id, if any."""
        for i, article in enumerate(self.articles):
            if article.id == article_id:
                return i
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON-ready persisted layout."""
        return {"articles": [article.to_dict() for article in self.articles]}
