from feedview.loader.base import ArticleLoader
from feedview.loader.file import FileArticleLoader
from feedview.loader.http import HttpArticleLoader
from feedview.loader.payload import parse_payload

__all__ = ["ArticleLoader", "FileArticleLoader", "HttpArticleLoader", "parse_payload"]
