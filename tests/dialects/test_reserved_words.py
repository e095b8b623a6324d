from gbasedialect import GBaseDialect
from gbasedialect.dialects import RESERVED_WORDS, is_reserved_word


def test_membership_is_case_insensitive():
    for word in ("select", "SELECT", "Select"):
        assert is_reserved_word(word)
        assert GBaseDialect().is_reserved_word(word)


def test_non_keywords_are_not_reserved():
    assert not is_reserved_word("customer")
    assert not is_reserved_word("")


def test_word_list_shape():
    assert len(RESERVED_WORDS) == 215
    assert len(set(RESERVED_WORDS)) == len(RESERVED_WORDS)
    assert all(word == word.upper() for word in RESERVED_WORDS)
    assert {"LOCK", "UNLOCK", "WRITE", "ZEROFILL", "YEAR_MONTH"} <= set(RESERVED_WORDS)
    assert GBaseDialect().reserved_words == RESERVED_WORDS
