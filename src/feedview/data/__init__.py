"""Data models for feedview."""

from feedview.data.models import Article, LoadResult, RevealedArticle

__all__ = [
    "Article",
    "LoadResult",
    "RevealedArticle",
]
