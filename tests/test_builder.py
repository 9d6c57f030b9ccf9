from trello_spore.parser.builder import build_method, spore_path
from trello_spore.parser.document import parse_html
from trello_spore.parser.sections import read_subsection


def _subsection(heading: str, arguments: str = ""):
    body = f"<ul><li>Arguments<ul>{arguments}</ul></li></ul>" if arguments else ""
    markup = f'<div class="section" id="m"><h2>{heading}</h2>{body}</div>'
    return read_subsection(parse_html(markup).find("div"))


class TestBuildMethod:
    def test_documented_then_path_then_key(self):
        name, rec = build_method(_subsection(
            'GET <span>/boards/[board id]/cards</span>',
            '<li><span>fields</span> (required)</li>',
        ))
        assert name == "getBoardCards"
        assert rec.method == "GET"
        assert rec.path == "/boards/:board_id/cards"
        assert rec.required_params == ["fields", "board_id", "key"]
        assert rec.optional_params == ["token"]
        assert rec.param_info is None

    def test_documented_placeholder_not_repeated(self):
        _, rec = build_method(_subsection(
            'GET <span>/1/boards/[board_id]</span>',
            '<li><span>board_id</span> (required)</li>',
        ))
        assert rec.required_params == ["board_id", "key"]

    def test_optional_placeholder_also_required(self):
        _, rec = build_method(_subsection(
            'GET <span>/1/boards/[board_id]</span>',
            '<li><span>board_id</span> (optional)</li>',
        ))
        assert rec.required_params == ["board_id", "key"]
        assert rec.optional_params == ["board_id", "token"]

    def test_key_appended_even_when_documented(self):
        _, rec = build_method(_subsection(
            'GET <span>/1/members/me</span>',
            '<li><span>key</span> (required)</li>',
        ))
        assert rec.required_params == ["key", "key"]

    def test_required_token_not_added_to_optional(self):
        _, rec = build_method(_subsection(
            'POST <span>/1/boards</span>',
            '<li><span>name</span> (required)</li><li><span>token</span> (required)</li>',
        ))
        assert rec.required_params == ["name", "token", "key"]
        assert rec.optional_params == []

    def test_optional_token_not_duplicated(self):
        _, rec = build_method(_subsection(
            'GET <span>/1/tokens</span>',
            '<li><span>token</span> (optional)</li>',
        ))
        assert rec.optional_params == ["token"]

    def test_no_arguments(self):
        name, rec = build_method(_subsection('DELETE <span>/1/boards/[board_id]/members/[idMember]</span>'))
        assert name == "deleteBoardMembersIdmember"
        assert rec.required_params == ["board_id", "idMember", "key"]
        assert rec.optional_params == ["token"]

    def test_param_info_only_for_described_params(self):
        _, rec = build_method(_subsection(
            'GET <span>/1/boards/[board_id]</span>',
            '<li><span>fields</span> (optional)<ul><li><strong>Default:</strong> <span>all</span></li></ul></li>'
            '<li><span>filter</span> (optional)</li>',
        ))
        assert set(rec.param_info) == {"fields"}
        assert rec.param_info["fields"].default_value == "all"
        assert "filter" in rec.optional_params


class TestSporePath:
    def test_placeholders_become_colon_names(self):
        assert spore_path("/1/cards/[card id or shortlink]/actions") == "/1/cards/:card_id_or_shortlink/actions"

    def test_plain_path_unchanged(self):
        assert spore_path("/1/boards") == "/1/boards"
