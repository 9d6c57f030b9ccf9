"""Builds a complete MethodRecord from one documented subsection."""

from .base import MethodRecord, ParamInfo
from .names import method_name
from .params import PLACEHOLDER_RE, path_placeholders
from .sections import Subsection

KEY_PARAM = "key"
TOKEN_PARAM = "token"


def build_method(subsection: Subsection) -> tuple[str, MethodRecord]:
    """Return the canonical name and the record of a subsection.

    Documented arguments come first, then path placeholders not already
    required, then ``key``. ``token`` is optional unless documented.
    """
    required: list[str] = []
    optional: list[str] = []
    infos: dict[str, ParamInfo] = {}

    for arg in subsection.arguments():
        (required if arg.required else optional).append(arg.name)
        if not arg.info.is_empty():
            infos[arg.name] = arg.info

    for name in path_placeholders(subsection.path):
        if name not in required:
            required.append(name)

    # Appended even when documented, which may duplicate it.
    required.append(KEY_PARAM)

    if TOKEN_PARAM not in required and TOKEN_PARAM not in optional:
        optional.append(TOKEN_PARAM)

    record = MethodRecord(
        method=subsection.verb,
        path=spore_path(subsection.path),
        required_params=required,
        optional_params=optional,
        param_info=infos or None,
    )
    return method_name(subsection.verb, subsection.path), record


def spore_path(path: str) -> str:
    """``/1/boards/[board id]`` -> ``/1/boards/:board_id``."""
    return PLACEHOLDER_RE.sub(r":\1", path.replace(" ", "_"))
