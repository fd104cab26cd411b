from feedview.filter.base import ArticleFilter
from feedview.filter.title import TitleFilter, filter_articles

__all__ = ["ArticleFilter", "TitleFilter", "filter_articles"]
