"""
GitHub repository and profile extractor.
"""

from urllib.parse import urlparse

from ..platform_detector import PlatformType
from .base import SiteExtractor, first_text, meta_property


class GitHubExtractor(SiteExtractor):
    """Extractor for GitHub repositories, READMEs and profiles."""

    PLATFORM = PlatformType.GITHUB
    DEFAULT_TITLE = "GitHub Project"

    AUTHOR_SOURCES = (meta_property("profile:username"), first_text(".author"))
    CONTENT_SELECTORS = (".markdown-body", "#readme", ".repository-content")

    def default_author(self, url: str) -> str:
        # github.com/<owner>/<repo>
        path_parts = urlparse(url).path.strip("/").split("/")
        return path_parts[0] if path_parts else ""
