"""Retrieval of region pages, from the web or from saved copies."""

from pathlib import Path

import requests

from trello_spore.config import ApiSettings
from trello_spore.exceptions import RegionNotFoundError, RetrievalError
from trello_spore.parser.document import HtmlNode, parse_html


class DocFetcher:
    """Downloads region pages over HTTP."""

    def __init__(self, settings: ApiSettings, session: requests.Session | None = None):
        self.settings = settings
        self.session = session or requests.Session()

    def __enter__(self) -> "DocFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def location(self, region: str) -> str:
        return self.settings.region_url(region)

    def fetch(self, region: str) -> HtmlNode:
        """Return the node whose id is ``region`` on the region's page."""
        url = self.location(region)
        try:
            response = self.session.get(url, timeout=self.settings.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise RetrievalError(region, url, str(e)) from e
        return region_root(response.content, region, url)


class DirectoryFetcher:
    """Reads ``<region>.html`` files saved in a local directory."""

    def __init__(self, directory: Path):
        self.directory = directory

    def __enter__(self) -> "DirectoryFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        pass

    def location(self, region: str) -> str:
        return str(self.directory / f"{region}.html")

    def fetch(self, region: str) -> HtmlNode:
        path = self.directory / f"{region}.html"
        try:
            markup = path.read_bytes()
        except OSError as e:
            raise RetrievalError(region, str(path), e.strerror or str(e)) from e
        return region_root(markup, region, str(path))


def region_root(markup: str | bytes, region: str, location: str) -> HtmlNode:
    root = parse_html(markup).find_by_id(region)
    if root is None:
        raise RegionNotFoundError(region, location)
    return root
