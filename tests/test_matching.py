"""Tests for candidate matching and the shared-prefix computation."""

from conftest import make_flag

from tabflags.completion.matching import find_matching_flags, flag_matches
from tabflags.completion.token import SearchOptions

# ---------------------------------------------------------------------------
# flag_matches()
# ---------------------------------------------------------------------------


class TestFlagMatches:
    def test_prefix_match(self) -> None:
        assert flag_matches(make_flag("hello"), SearchOptions(), "hel")

    def test_substring_needs_option(self) -> None:
        flag = make_flag("shell")
        assert not flag_matches(flag, SearchOptions(), "hel")
        assert flag_matches(flag, SearchOptions(name_substring=True), "hel")

    def test_location_match(self) -> None:
        flag = make_flag("port", "src/net/server.py")
        assert not flag_matches(flag, SearchOptions(name_substring=True), "net")
        assert flag_matches(flag, SearchOptions(location_substring=True), "net")

    def test_description_match(self) -> None:
        flag = make_flag("cert", description="Path to the TLS certificate")
        assert not flag_matches(flag, SearchOptions(location_substring=True), "TLS")
        assert flag_matches(flag, SearchOptions(description_substring=True), "TLS")

    def test_description_match_is_case_sensitive(self) -> None:
        flag = make_flag("cert", description="Path to the TLS certificate")
        assert not flag_matches(flag, SearchOptions(description_substring=True), "tls")

    def test_empty_token_matches_everything(self) -> None:
        assert flag_matches(make_flag("anything"), SearchOptions(), "")


# ---------------------------------------------------------------------------
# find_matching_flags()
# ---------------------------------------------------------------------------


class TestFindMatchingFlags:
    def test_collects_matches_by_name(self) -> None:
        snapshot = (make_flag("help"), make_flag("height"), make_flag("port"))
        matches, _ = find_matching_flags(snapshot, SearchOptions(), "he")
        assert set(matches) == {"help", "height"}

    def test_no_matches(self) -> None:
        matches, prefix = find_matching_flags((make_flag("port"),), SearchOptions(), "he")
        assert matches == {}
        assert prefix == ""

    def test_prefix_of_single_match_is_its_name(self) -> None:
        _, prefix = find_matching_flags((make_flag("verbose"),), SearchOptions(), "v")
        assert prefix == "verbose"

    def test_common_prefix(self) -> None:
        snapshot = (make_flag("version"), make_flag("versions"), make_flag("versioned"))
        _, prefix = find_matching_flags(snapshot, SearchOptions(), "ver")
        assert prefix == "version"

    def test_prefix_equal_to_token(self) -> None:
        snapshot = (make_flag("help"), make_flag("height"), make_flag("hello"))
        _, prefix = find_matching_flags(snapshot, SearchOptions(), "he")
        assert prefix == "he"

    def test_substring_match_collapses_prefix(self) -> None:
        snapshot = (make_flag("help"), make_flag("shell"))
        _, prefix = find_matching_flags(snapshot, SearchOptions(name_substring=True), "hel")
        assert prefix == ""

    def test_empty_prefix_stays_empty(self) -> None:
        snapshot = (make_flag("alpha"), make_flag("beta"), make_flag("alpine"))
        _, prefix = find_matching_flags(snapshot, SearchOptions(), "")
        assert prefix == ""

    def test_duplicate_names_keep_first(self) -> None:
        first = make_flag("port", "a/one.py")
        second = make_flag("port", "b/two.py")
        matches, _ = find_matching_flags((first, second), SearchOptions(), "po")
        assert matches == {"port": first}
