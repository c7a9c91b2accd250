import logging

from wordgrid.trie import ROOT, DictionaryIndex, load_index


def _walk(index: DictionaryIndex, word: str):
    node = ROOT
    for ch in word:
        node = index.descend(node, ch)
        if node is None:
            return None
    return node


def test_build_lowercases_and_marks_words():
    index = DictionaryIndex.build(["Cat", "CATS", "dog"])
    assert index.ready
    assert len(index) == 3
    node = _walk(index, "cat")
    assert node is not None
    assert index.is_word(node)
    assert index.has_children(node)
    assert not index.has_children(_walk(index, "cats"))


def test_prefix_is_not_a_word():
    index = DictionaryIndex.build(["cats"])
    node = _walk(index, "cat")
    assert node is not None
    assert not index.is_word(node)


def test_short_and_empty_entries_skipped():
    index = DictionaryIndex.build(["", "  ", "a", "ab", "abc"])
    assert len(index) == 1
    assert "abc" in index
    assert "ab" not in index
    assert _walk(index, "ab") is not None  # still a prefix of "abc"


def test_custom_min_length():
    index = DictionaryIndex.build(["abc", "abcde"], min_length=5)
    assert "abc" not in index
    assert "abcde" in index


def test_duplicates_counted_once():
    index = DictionaryIndex.build(["tree", "TREE", "tree"])
    assert len(index) == 1


def test_unknown_character_has_no_edge():
    index = DictionaryIndex.build(["abc"])
    assert index.descend(ROOT, "z") is None
    assert index.descend(ROOT, "!") is None


def test_contains_is_case_insensitive():
    index = DictionaryIndex.build(["queen"])
    assert index.contains("QUEEN")
    assert not index.contains("quee")
    assert not index.contains("")


def test_unbuilt_index():
    index = DictionaryIndex()
    assert not index.ready
    assert len(index) == 0
    assert index.node_count == 0
    assert not index.contains("cat")


def test_empty_word_list_is_ready():
    index = DictionaryIndex.build([])
    assert index.ready
    assert index.node_count == 1
    assert not index.has_children(ROOT)


def test_load_index(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("apple\nBanana\n\nfig\nox\n", encoding="utf-8")
    index = load_index(dict_file)
    assert len(index) == 3
    assert "banana" in index
    assert "ox" not in index


def test_load_index_logs_once_at_info(tmp_path, caplog):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("apple\nfig\n", encoding="utf-8")
    with caplog.at_level(logging.DEBUG, logger="wordgrid"):
        load_index(dict_file)
    info = [r for r in caplog.records if r.levelno == logging.INFO]
    assert len(info) == 1
    assert "Indexed 2 words" in info[0].getMessage()
