from wordgraph.normalize import normalize_word, strip_non_letters, tokenize


def test_non_letters_become_separators():
    assert tokenize("Hello, world!  It's 2024.") == ["hello", "world", "it", "s"]

def test_keep_case_only_changes_casing():
    assert tokenize("Seek, TO explore!", keep_case=True) == ["Seek", "TO", "explore"]

def test_digits_and_unicode_letters_are_dropped():
    # only ASCII letters count as word characters
    assert tokenize("café 42 naïve") == ["caf", "na", "ve"]

def test_empty_and_symbol_only_input():
    assert tokenize("") == []
    assert tokenize("... --- !!!") == []

def test_strip_non_letters_keeps_length():
    s = "a,b"
    assert strip_non_letters(s) == "a b"

def test_normalize_word_lowercases():
    assert normalize_word("ExPlOrE") == "explore"
