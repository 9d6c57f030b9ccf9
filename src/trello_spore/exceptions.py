"""Errors raised while turning documentation pages into a SPORE descriptor."""


class SporeError(Exception):
    """Base class for every error this package raises on purpose."""


class ConfigError(SporeError):
    """The settings file is missing, unreadable or malformed."""


class RetrievalError(SporeError):
    """A region's documentation page could not be obtained."""

    def __init__(self, region: str, url: str, reason: str):
        self.region = region
        self.url = url
        super().__init__(f"Cannot retrieve '{region}' from {url}: {reason}")


class RegionNotFoundError(RetrievalError):
    """The page was fetched but carries no node with the region's id."""

    def __init__(self, region: str, url: str):
        super().__init__(region, url, f"no element with id '{region}'")


class MalformedSubsection(SporeError):
    """A method subsection has no usable verb or path."""


class NameCollisionError(SporeError):
    """Two subsections produced the same canonical method name."""

    def __init__(self, name: str, first: str, second: str):
        self.name = name
        super().__init__(f"Method name '{name}' produced by both {first} and {second}")
