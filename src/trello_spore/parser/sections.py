"""Method subsections of a documentation region.

Each region page wraps its methods in ``div.section`` blocks::

    <div class="section" id="get-1-boards-board-id">
      <h2>GET <span class="pre">/1/boards/[board_id]</span></h2>
      <ul>
        <li>Required permissions: ...</li>
        <li>Arguments<ul>...one <li> per argument...</ul></li>
      </ul>
    </div>
"""

import logging
import re
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from trello_spore.exceptions import MalformedSubsection
from .base import Argument
from .document import HtmlNode
from .params import parse_argument

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s")
ARGUMENTS_LABEL = "Arguments"


class Subsection(BaseModel):
    """Verb, path and argument list node of one documented method."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    verb: str
    path: str
    arguments_list: HtmlNode | None = None

    def arguments(self) -> list[Argument]:
        """Parse the direct entries of the arguments list, skipping unnamed ones."""
        if self.arguments_list is None:
            return []
        items = self.arguments_list.find_all("li", recursive=False)
        return [arg for arg in (parse_argument(item) for item in items) if arg is not None]


def iter_subsections(region: HtmlNode, name: str) -> Iterator[Subsection]:
    """Yield every well-formed method subsection under a region root.

    Subsections missing a verb or a path are logged and skipped.
    """
    candidates = region.iter_all(
        "div", lambda node: node.id != name, class_="section"
    )
    for section in candidates:
        try:
            yield read_subsection(section)
        except MalformedSubsection as e:
            logger.warning("Skipping subsection %s in '%s': %s", section.id, name, e)


def read_subsection(section: HtmlNode) -> Subsection:
    heading = section.find("h2")
    if heading is None:
        raise MalformedSubsection("no heading")

    verb = _heading_verb(heading)
    if not verb:
        raise MalformedSubsection("no HTTP verb in heading")

    label = heading.find("span")
    if label is None:
        raise MalformedSubsection(f"no path in heading after {verb}")

    return Subsection(verb=verb, path=label.text, arguments_list=_arguments_list(section))


def _heading_verb(heading: HtmlNode) -> str:
    for text in heading.own_strings:
        verb = WHITESPACE_RE.sub("", text)
        if verb:
            return verb
    return ""


def _arguments_list(section: HtmlNode) -> HtmlNode | None:
    marker = section.find("li", lambda node: node.text.lstrip().startswith(ARGUMENTS_LABEL))
    if marker is None:
        return None
    return marker.find("ul")
