"""Tag tokenizer tests"""
from minihtml.parsing import TagToken, TextToken, Tokenizer, tokenize


def test_open_and_close_tokens():
    tokens = list(tokenize('<a href="x">hi</a>'))
    assert tokens == [
        TagToken(False, "a", ' href="x"'),
        TagToken(True, "a", ""),
    ]


def test_tag_name_is_lowercased_but_attributes_are_raw():
    tokens = list(tokenize('<DIV Class="Big">'))
    assert tokens == [TagToken(False, "div", ' Class="Big"')]


def test_heading_tags_are_accepted():
    names = [token.tag_name for token in tokenize("<h1></h1><H6></H6>")]
    assert names == ["h1", "h1", "h6", "h6"]


def test_non_tag_angle_brackets_are_not_matched():
    assert list(tokenize("a < b and c > d")) == []
    assert list(tokenize("<!DOCTYPE html>")) == []
    assert list(tokenize("<>")) == []


def test_empty_input_yields_nothing():
    assert list(tokenize("")) == []


def test_text_outside_tags_is_dropped_by_default():
    tokens = list(tokenize("before<p>inside</p>after"))
    assert all(isinstance(token, TagToken) for token in tokens)
    assert len(tokens) == 2


def test_text_tokens_when_enabled():
    tokens = list(tokenize("<p>Hello <b>world</b>!</p>", include_text=True))
    assert tokens == [
        TagToken(False, "p", ""),
        TextToken("Hello "),
        TagToken(False, "b", ""),
        TextToken("world"),
        TagToken(True, "b", ""),
        TextToken("!"),
        TagToken(True, "p", ""),
    ]


def test_whitespace_only_text_is_skipped():
    tokens = list(tokenize("<ul>\n  <li>a</li>\n</ul>", include_text=True))
    assert [type(token) for token in tokens] == [TagToken, TagToken, TextToken, TagToken, TagToken]


def test_leading_and_trailing_text():
    tokens = list(tokenize("abc<br>tail", include_text=True))
    assert tokens == [TextToken("abc"), TagToken(False, "br", ""), TextToken("tail")]


def test_tokenizer_is_restartable():
    tokenizer = Tokenizer("<a><b></b></a>")
    first = list(tokenizer)
    second = list(tokenizer)
    assert first == second
    assert len(first) == 4


def test_tokenizer_is_lazy():
    stream = iter(Tokenizer("<a>" * 5))
    assert next(stream) == TagToken(False, "a", "")
