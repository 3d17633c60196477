"""
Tests for WordSource
====================
Language lookup, line counting with memoization, random line selection.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from pwdgen.errors import (
    EmptyWordListError,
    MissingWordListError,
    ResourceUnreadableError,
)
from pwdgen.wordlist import WordSource

from conftest import MaximumRandom, ScriptedRandom


class TestLanguages:

    def test_resolve(self, word_source, words_dir):
        assert word_source.resolve('en') == words_dir / 'en.txt'

    def test_resolve_missing(self, word_source):
        with pytest.raises(MissingWordListError):
            word_source.resolve('fr')

    def test_resolve_rejects_paths(self, word_source):
        with pytest.raises(MissingWordListError):
            word_source.resolve('../en')

    def test_missing_is_lookup_error(self, word_source):
        with pytest.raises(LookupError):
            word_source.word_for('fr')

    def test_languages(self, word_source, words_dir):
        (words_dir / 'notes.md').write_text('not a list')
        assert word_source.languages() == ['en', 'nl']

    def test_languages_without_directory(self, tmp_path):
        source = WordSource(words_dir=tmp_path / 'nowhere')
        assert source.languages() == []

    def test_shipped_lists(self):
        source = WordSource()
        assert 'en' in source.languages()
        assert 'nl' in source.languages()
        assert source.line_count(source.resolve('en')) > 100


class TestLineCount:

    def test_counts_records(self, word_source, words_dir):
        assert word_source.line_count(words_dir / 'en.txt') == 3

    def test_final_line_without_newline(self, word_source, tmp_path):
        path = tmp_path / 'list.txt'
        path.write_text('a\nb\nc')
        assert word_source.line_count(path) == 3

    def test_empty_file(self, word_source, tmp_path):
        path = tmp_path / 'empty.txt'
        path.write_text('')
        assert word_source.line_count(path) == 0

    def test_missing_file(self, word_source, tmp_path):
        with pytest.raises(ResourceUnreadableError):
            word_source.line_count(tmp_path / 'nope.txt')

    def test_memoized(self, word_source, words_dir, monkeypatch):
        scans = {"n": 0}
        original = WordSource._count_lines

        def counting(self, path):
            scans["n"] += 1
            return original(self, path)

        monkeypatch.setattr(WordSource, "_count_lines", counting)

        path = words_dir / 'en.txt'
        assert word_source.line_count(path) == 3
        assert word_source.line_count(path) == 3
        assert word_source.line_count(str(path)) == 3
        assert scans["n"] == 1

    def test_cached_count_survives_edit(self, word_source, words_dir):
        path = words_dir / 'en.txt'
        assert word_source.line_count(path) == 3
        path.write_text('cat\ndog\neagle\nfox\n')
        assert word_source.line_count(path) == 3

        word_source.clear_cache()
        assert word_source.line_count(path) == 4

    def test_cache_is_per_instance(self, words_dir, monkeypatch):
        scans = {"n": 0}
        original = WordSource._count_lines

        def counting(self, path):
            scans["n"] += 1
            return original(self, path)

        monkeypatch.setattr(WordSource, "_count_lines", counting)

        WordSource(words_dir=words_dir).line_count(words_dir / 'en.txt')
        WordSource(words_dir=words_dir).line_count(words_dir / 'en.txt')
        assert scans["n"] == 2

    def test_concurrent_counts_agree(self, word_source, words_dir):
        path = words_dir / 'en.txt'
        with ThreadPoolExecutor(max_workers=8) as pool:
            counts = list(pool.map(lambda _: word_source.line_count(path), range(32)))
        assert set(counts) == {3}


class TestRandomLine:

    def test_first_line(self, word_source):
        assert word_source.word_for('en') == 'cat'

    def test_last_line(self, words_dir):
        source = WordSource(words_dir=words_dir, rng=MaximumRandom())
        assert source.word_for('en') == 'eagle'

    def test_draw_range(self, words_dir):
        rng = ScriptedRandom([1])
        source = WordSource(words_dir=words_dir, rng=rng)
        assert source.word_for('en') == 'dog'
        assert rng.calls == [(0, 2)]

    def test_trims_whitespace(self, tmp_path):
        path = tmp_path / 'padded.txt'
        path.write_text('  alpha \r\n\tbeta\t\n')
        source = WordSource(words_dir=tmp_path, rng=ScriptedRandom([0, 1]))
        assert source.random_line_from(path) == 'alpha'
        assert source.random_line_from(path) == 'beta'

    def test_empty_list(self, words_dir, word_source):
        (words_dir / 'xx.txt').write_text('')
        with pytest.raises(EmptyWordListError):
            word_source.word_for('xx')

    def test_unreadable(self, word_source, tmp_path):
        with pytest.raises(ResourceUnreadableError):
            word_source.random_line_from(tmp_path / 'nope.txt')

    def test_unreadable_is_os_error(self, word_source, tmp_path):
        with pytest.raises(OSError):
            word_source.random_line_from(tmp_path / 'nope.txt')

    def test_every_word_reachable(self, words_dir):
        from pwdgen.entropy import RandomSource
        source = WordSource(words_dir=words_dir, rng=RandomSource(seed=7))
        seen = {source.word_for('en') for _ in range(200)}
        assert seen == {'cat', 'dog', 'eagle'}
