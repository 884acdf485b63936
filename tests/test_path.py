import pytest

from routespec.builder.path import sanitize_path


class TestSanitizePath:
    def test_strips_regex_constraint(self):
        assert sanitize_path("/a/{c:[a-z]+}") == "/a/{c}"

    def test_keeps_plain_variable(self):
        assert sanitize_path("/a/{b}") == "/a/{b}"

    def test_collapses_empty_segments(self):
        assert sanitize_path("//a//b/") == "/a/b"

    def test_adds_leading_slash(self):
        assert sanitize_path("a/b") == "/a/b"

    @pytest.mark.parametrize("path", ["", "/", "///"])
    def test_empty_input(self, path):
        assert sanitize_path(path) == ""

    def test_constraint_with_colons_keeps_name_only(self):
        assert sanitize_path("/t/{ts:[0-9]{2}:[0-9]{2}}") == "/t/{ts}"

    def test_unmatched_brace_passes_through(self):
        assert sanitize_path("/a/{b/c") == "/a/{b/c"

    @pytest.mark.parametrize("path", [
        "/tests/{v}/a/{b}/{c:[a-z]+}",
        "//a//b/",
        "/x/{y:}",
        "/weird/{a:b}:c}",
        "no/leading/slash/",
    ])
    def test_idempotent(self, path):
        once = sanitize_path(path)
        assert sanitize_path(once) == once
