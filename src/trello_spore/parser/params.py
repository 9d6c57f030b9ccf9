"""Argument and path-placeholder extraction.

An argument entry in the documentation looks like::

    <li><span class="pre">fields</span> (required)
      <ul>
        <li><strong>Default:</strong> <span class="pre">all</span></li>
        <li><strong>Valid Values:</strong> One of:
          <ul><li><span class="pre">name</span></li>...</ul>
        </li>
      </ul>
    </li>
"""

import logging
import re

from .base import Argument, ParamInfo
from .document import HtmlNode

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\[(.*?)\]")

REQUIRED_MARK = "required"
DEFAULT_LABEL = "Default:"
VALID_VALUES_LABEL = "Valid Values:"
MULTIPLE_MARK = "or a comma-separated list of:"


def parse_argument(item: HtmlNode) -> Argument | None:
    """Extract one argument from its list item.

    Returns None when the item has no name label; the caller skips it.
    """
    label = item.find("span")
    if label is None:
        logger.warning("Skipping argument without a name: %r", item.text.strip()[:60])
        return None

    valid_values, allow_multiple = _valid_values(item)
    info = ParamInfo(
        default_value=_default_value(item),
        valid_values=valid_values or None,
        allow_multiple=allow_multiple,
    )
    return Argument(
        name=label.text,
        required=REQUIRED_MARK in item.text,
        info=info,
    )


def path_placeholders(path: str) -> list[str]:
    """Names of the ``[bracketed]`` segments of a path, in order, without repeats."""
    names: list[str] = []
    for match in PLACEHOLDER_RE.finditer(path):
        name = match.group(1).replace(" ", "_")
        if name not in names:
            names.append(name)
    return names


def _marker(item: HtmlNode, label: str) -> HtmlNode | None:
    return item.find("strong", lambda node: node.text == label)


def _default_value(item: HtmlNode) -> str | None:
    marker = _marker(item, DEFAULT_LABEL)
    if marker is None:
        return None
    value = marker.parent.find("span")
    return value.text if value is not None else None


def _valid_values(item: HtmlNode) -> tuple[list[str], bool | None]:
    marker = _marker(item, VALID_VALUES_LABEL)
    if marker is None:
        return [], None
    block = marker.parent
    values_list = block.find("ul")
    if values_list is None:
        return [], None
    values = [span.text for span in values_list.find_all("span")]
    return values, MULTIPLE_MARK in block.text
