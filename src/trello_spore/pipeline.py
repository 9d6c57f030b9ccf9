"""End-to-end run: fetch every region and fold its methods into one document."""

from collections.abc import Callable
from typing import Protocol

from trello_spore.config import ApiSettings
from trello_spore.generator.assembler import DescriptorAssembler
from trello_spore.generator.ordering import OrderingAssigner
from trello_spore.parser.document import HtmlNode
from trello_spore.parser.sections import Subsection


class Fetcher(Protocol):
    def location(self, region: str) -> str: ...

    def fetch(self, region: str) -> HtmlNode: ...


def build_document(
    settings: ApiSettings,
    fetcher: Fetcher,
    strict: bool = False,
    on_progress: Callable[[str], None] | None = None,
) -> DescriptorAssembler:
    """Process ``settings.regions`` in order and return the filled assembler.

    Retrieval errors propagate and stop the run.
    """
    def report(line: str) -> None:
        if on_progress is not None:
            on_progress(line)

    def report_method(subsection: Subsection) -> None:
        report(f"  {subsection.verb} {subsection.path}")

    assembler = DescriptorAssembler(settings, OrderingAssigner(), strict=strict)
    for region in settings.regions:
        report(f"Retrieving {fetcher.location(region)}...")
        root = fetcher.fetch(region)
        assembler.add_region(root, region, on_method=report_method)
        report("")
    return assembler
