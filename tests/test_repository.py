"""Tests for Repository create, lookup and search operations."""

import threading

import pytest

from wordblocks import (
    Components,
    EntityNotFoundError,
    MorphemeKind,
    Repository,
)


class TestSeed:
    """Reference dataset loaded by the constructor."""

    def test_seed_counts(self, repo):
        assert repo.morpheme_count == 16
        assert repo.word_count == 9

    def test_seed_ids_are_sequential(self, repo):
        word_ids = [w.id for w in repo.list_words()]
        assert word_ids == list(range(1, 10))
        morpheme_ids = sorted(
            m.id
            for kind in MorphemeKind
            for m in repo.list_morphemes_by_kind(kind)
        )
        assert morpheme_ids == list(range(1, 17))

    def test_seed_first_word(self, repo):
        assert repo.list_words()[0].word == "dishonesty"

    def test_no_seed(self, empty_repo):
        assert empty_repo.word_count == 0
        assert empty_repo.morpheme_count == 0
        assert empty_repo.list_words() == []

    def test_seed_from_file(self, tmp_path):
        path = tmp_path / "tiny.yaml"
        path.write_text(
            "morphemes:\n"
            "  - {text: pre-, type: prefix, definition: before}\n"
            "words:\n"
            "  - {word: preview, definition: see before, "
            "components: {prefix: pre-, root: view}}\n",
            encoding="utf-8",
        )
        r = Repository(seed_path=path)
        assert r.word_count == 1
        assert r.get_word("preview").components.prefix == "pre-"
        assert r.get_word("dishonesty") is None

    def test_no_seed_ignores_seed_path(self, tmp_path):
        path = tmp_path / "tiny.yaml"
        path.write_text(
            "words:\n  - {word: one, definition: '1', components: {root: one}}\n",
            encoding="utf-8",
        )
        r = Repository(seed=False, seed_path=path)
        assert r.word_count == 0
        assert r.morpheme_count == 0

    def test_seed_words_without_suffix_have_none(self, repo):
        disagree = repo.get_word("disagree")
        assert disagree.components.suffix is None
        assert disagree.components.prefix == "dis-"


class TestDishonestyScenario:

    def test_components_root(self, small_repo):
        assert small_repo.get_word("dishonesty").components.root == "honest"

    def test_prefix_definition(self, small_repo):
        assert small_repo.get_morpheme("dis-", "prefix").definition

    def test_search_by_root_and_suffix(self, small_repo):
        results = small_repo.list_words("honesty")
        assert len(results) == 1
        assert results[0].word == "dishonesty"


class TestMorphemes:

    def test_create_and_get(self, empty_repo):
        m = empty_repo.create_morpheme("un-", "prefix", "not", ["undo", "undo"])
        assert m.id == 1
        assert m.kind is MorphemeKind.PREFIX
        assert m.examples == ("undo", "undo")
        assert empty_repo.get_morpheme("un-", "prefix") == m
        assert empty_repo.get_morpheme("un-", MorphemeKind.PREFIX) == m

    def test_empty_examples(self, empty_repo):
        m = empty_repo.create_morpheme("zz", "root", "sleep")
        assert m.examples == ()

    def test_same_text_different_kind(self, empty_repo):
        empty_repo.create_morpheme("ful", "root", "full")
        empty_repo.create_morpheme("ful", "suffix", "full of")
        assert empty_repo.morpheme_count == 2
        assert empty_repo.get_morpheme("ful", "root").definition == "full"
        assert empty_repo.get_morpheme("ful", "suffix").definition == "full of"

    def test_key_is_a_pair_not_a_joined_string(self, empty_repo):
        m = empty_repo.create_morpheme("dis-", "prefix", "not")
        assert m.key == ("dis-", MorphemeKind.PREFIX)
        # "dis-" + "-" + "prefix" == "dis" + "-" + "-prefix"
        assert empty_repo.get_morpheme("dis", "-prefix") is None
        assert empty_repo.get_morpheme("dis-", "prefix") == m

    def test_texts_sharing_a_separator_stay_distinct(self, empty_repo):
        empty_repo.create_morpheme("a-pre", "root", "one")
        empty_repo.create_morpheme("a", "root", "two")
        assert empty_repo.get_morpheme("a-pre", "root").definition == "one"
        assert empty_repo.get_morpheme("a", "root").definition == "two"

    def test_overwrite_replaces_and_advances_id(self, empty_repo):
        first = empty_repo.create_morpheme("re-", "prefix", "again")
        second = empty_repo.create_morpheme("re-", "prefix", "back")
        assert (first.id, second.id) == (1, 2)
        assert empty_repo.get_morpheme("re-", "prefix") == second
        assert empty_repo.morpheme_count == 1
        third = empty_repo.create_morpheme("de-", "prefix", "down")
        assert third.id == 3

    def test_get_missing(self, repo):
        assert repo.get_morpheme("xyz", "root") is None
        assert repo.get_morpheme("dis-", "suffix") is None

    def test_get_unknown_kind_is_absent(self, repo):
        assert repo.get_morpheme("dis-", "infix") is None

    def test_require_morpheme(self, repo):
        assert repo.require_morpheme("-ful", "suffix").text == "-ful"
        with pytest.raises(EntityNotFoundError):
            repo.require_morpheme("-ful", "prefix")

    def test_create_unknown_kind_raises(self, empty_repo):
        with pytest.raises(ValueError):
            empty_repo.create_morpheme("in", "infix", "inside")
        assert empty_repo.create_morpheme("in-", "prefix", "inside").id == 1


class TestListMorphemesByKind:

    def test_only_matching_kind(self, repo):
        prefixes = repo.list_morphemes_by_kind("prefix")
        assert [m.text for m in prefixes] == ["dis-", "un-", "re-"]
        assert all(m.kind == "prefix" for m in prefixes)

    def test_roots_in_insertion_order(self, repo):
        roots = repo.list_morphemes_by_kind(MorphemeKind.ROOT)
        assert [m.text for m in roots] == [
            "honest", "happy", "construct", "respect",
            "agree", "appear", "connect", "like", "turb",
        ]

    def test_count_accounts_for_overwrites(self, empty_repo):
        empty_repo.create_morpheme("-er", "suffix", "one who")
        empty_repo.create_morpheme("-er", "suffix", "more")
        empty_repo.create_morpheme("-est", "suffix", "most")
        empty_repo.create_morpheme("walk", "root", "move")
        suffixes = empty_repo.list_morphemes_by_kind("suffix")
        assert len(suffixes) == 2
        assert suffixes[0].definition == "more"

    def test_empty_result(self, empty_repo):
        assert empty_repo.list_morphemes_by_kind("suffix") == []

    def test_unknown_kind_is_empty(self, repo):
        assert repo.list_morphemes_by_kind("infix") == []


class TestWords:

    def test_create_and_get(self, empty_repo):
        w = empty_repo.create_word(
            "redo", "do again", Components(root="do", prefix="re-")
        )
        assert w.id == 1
        assert empty_repo.get_word("redo") == w
        assert w.components.suffix is None

    def test_create_from_mapping_normalizes_empty(self, empty_repo):
        w = empty_repo.create_word(
            "dislike", "to not like",
            {"prefix": "dis-", "root": "like", "suffix": ""},
        )
        assert w.components == Components(root="like", prefix="dis-")

    def test_overwrite(self, empty_repo):
        first = empty_repo.create_word("x", "d1", {"root": "x"})
        second = empty_repo.create_word("x", "d2", {"root": "y", "suffix": "-s"})
        assert second.id == first.id + 1
        got = empty_repo.get_word("x")
        assert got.definition == "d2"
        assert got.components == Components(root="y", suffix="-s")
        assert [w.word for w in empty_repo.list_words()].count("x") == 1

    def test_overwrite_keeps_original_position(self, empty_repo):
        empty_repo.create_word("a", "first", {"root": "a"})
        empty_repo.create_word("b", "second", {"root": "b"})
        empty_repo.create_word("a", "again", {"root": "a"})
        assert [w.word for w in empty_repo.list_words()] == ["a", "b"]

    def test_get_missing(self, repo):
        assert repo.get_word("nonexistent") is None

    def test_lookup_is_exact(self, repo):
        assert repo.get_word("Dishonesty") is None

    def test_require_word(self, repo):
        assert repo.require_word("dislike").definition
        with pytest.raises(EntityNotFoundError):
            repo.require_word("like")

    def test_components_need_no_morpheme(self, empty_repo):
        w = empty_repo.create_word("exempt", "free from", {"prefix": "ex-", "root": "empt"})
        assert empty_repo.get_word("exempt") == w
        assert empty_repo.morpheme_count == 0


class TestListWords:

    def test_all_in_creation_order(self, repo):
        assert [w.word for w in repo.list_words()] == [
            "dishonesty", "unhappiness", "reconstruction", "disrespectful",
            "disagree", "disappear", "disconnect", "dislike", "disturb",
        ]

    def test_case_insensitive_substring(self, empty_repo):
        empty_repo.create_word("disagree", "d", {"prefix": "dis-", "root": "agree"})
        empty_repo.create_word("Disappear", "d", {"prefix": "dis-", "root": "appear"})
        empty_repo.create_word("honesty", "d", {"root": "honest", "suffix": "-y"})
        results = [w.word for w in empty_repo.list_words("dis")]
        assert results == ["disagree", "Disappear"]

    def test_uppercase_filter(self, repo):
        assert [w.word for w in repo.list_words("HAPPI")] == ["unhappiness"]

    def test_matches_inside_word(self, repo):
        words = [w.word for w in repo.list_words("connect")]
        assert words == ["disconnect"]

    def test_no_match(self, repo):
        assert repo.list_words("qqq") == []

    def test_empty_filter_returns_all(self, repo):
        assert len(repo.list_words("")) == 9

    def test_repeated_calls_identical(self, repo):
        assert repo.list_words("dis") == repo.list_words("dis")
        assert repo.list_morphemes_by_kind("root") == repo.list_morphemes_by_kind("root")
        assert repo.get_word("disturb") == repo.get_word("disturb")

    def test_result_is_a_copy(self, repo):
        words = repo.list_words()
        words.clear()
        assert repo.word_count == 9


class TestResolveComponents:

    def test_full_word(self, repo):
        parts = repo.resolve_components("dishonesty")
        assert [(k.value, t) for k, t, _ in parts] == [
            ("prefix", "dis-"), ("root", "honest"), ("suffix", "-y"),
        ]
        assert all(m is not None for _, _, m in parts)
        assert parts[1][2].definition.startswith("From Latin")

    def test_missing_morpheme_is_none(self, empty_repo):
        empty_repo.create_word("nation", "a people", {"root": "nat", "suffix": "-ion"})
        empty_repo.create_morpheme("-ion", "suffix", "action")
        parts = empty_repo.resolve_components("nation")
        assert parts[0] == (MorphemeKind.ROOT, "nat", None)
        assert parts[1][2].text == "-ion"

    def test_absent_word(self, repo):
        assert repo.resolve_components("nothing") is None


class TestConcurrentCreates:

    def test_ids_unique_under_threads(self, empty_repo):
        def worker(n):
            for i in range(50):
                empty_repo.create_word(f"w{n}-{i}", "d", {"root": "w"})

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        words = empty_repo.list_words()
        assert len(words) == 400
        assert sorted(w.id for w in words) == list(range(1, 401))
