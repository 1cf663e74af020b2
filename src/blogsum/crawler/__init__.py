"""
Document fetching and scrape orchestration.
"""

from .http_client import FetchedDocument, HttpClient
from .scraper import WebScraper, validate_url

__all__ = ["FetchedDocument", "HttpClient", "WebScraper", "validate_url"]
