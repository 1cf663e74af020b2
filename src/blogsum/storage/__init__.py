from .sqlite_store import SQLiteArticleStore

__all__ = ["SQLiteArticleStore"]
