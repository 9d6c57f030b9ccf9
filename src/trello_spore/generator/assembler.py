"""Collects method records from every region into one ConfigDocument."""

import json
import logging
from collections.abc import Callable

from trello_spore.config import ApiSettings
from trello_spore.exceptions import NameCollisionError
from trello_spore.generator.ordering import OrderingAssigner
from trello_spore.parser.base import ConfigDocument, MethodRecord
from trello_spore.parser.builder import build_method
from trello_spore.parser.document import HtmlNode
from trello_spore.parser.sections import Subsection, iter_subsections

logger = logging.getLogger(__name__)

JSON_INDENT = 3


class DescriptorAssembler:
    """Accumulates records keyed by canonical name, in discovery order.

    A name seen twice keeps the rank of its first sighting while the later
    record replaces the earlier one. With ``strict=True`` this raises
    NameCollisionError instead.
    """

    def __init__(self, settings: ApiSettings, ordering: OrderingAssigner | None = None,
                 strict: bool = False):
        self.ordering = ordering or OrderingAssigner()
        self.strict = strict
        self.document = ConfigDocument(
            name=settings.name,
            base_url=settings.base_url,
            formats=list(settings.formats),
            version=settings.version,
        )
        self._origins: dict[str, str] = {}

    def add(self, name: str, record: MethodRecord) -> None:
        origin = f"{record.method} {record.path}"
        if name in self.document.methods:
            if self.strict:
                raise NameCollisionError(name, self._origins[name], origin)
            logger.warning("%s replaces %s as '%s'", origin, self._origins[name], name)
        self.ordering.assign(name)
        self.document.methods[name] = record
        self._origins[name] = origin

    def add_region(self, region: HtmlNode, region_name: str,
                   on_method: Callable[[Subsection], None] | None = None) -> list[str]:
        """Add every method of a region; returns their names in page order."""
        names = []
        for subsection in iter_subsections(region, region_name):
            if on_method is not None:
                on_method(subsection)
            name, record = build_method(subsection)
            self.add(name, record)
            names.append(name)
        return names

    def payload(self) -> dict:
        """The document as plain data, keys in output order."""
        return self.ordering.ordered(self.document.payload())

    def to_json(self) -> str:
        return json.dumps(self.payload(), indent=JSON_INDENT, ensure_ascii=False)
