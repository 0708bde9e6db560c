import pytest

from medilingo.lexer import PATTERN_TABLE, Token, TokenType, tokenize

R, Q, U, F, P, X = (
    TokenType.ROUTE, TokenType.QUANTITY, TokenType.UNIT,
    TokenType.FREQUENCY, TokenType.PERIOD, TokenType.INVALID,
)


def types(text):
    return [t.type for t in tokenize(text)]


def test_interval_frequency_is_one_token():
    toks = tokenize("take 1 tablet every 8 hours.")
    assert [t.type for t in toks] == [R, Q, U, F, P]
    assert toks[3] == Token(F, "every 8 hours")
    assert toks[4] == Token(P, ".")


def test_unknown_word_becomes_invalid_without_its_period():
    assert tokenize("take 1 widget.") == [
        Token(R, "take"), Token(Q, "1"), Token(X, "widget"), Token(P, "."),
    ]


@pytest.mark.parametrize("text,expected", [
    ("take 2 tablets three times a day .", [R, Q, U, Q, X, Q, X, P]),
    ("take 1 tablet 2 times a day .", [R, Q, U, Q, X, Q, X, P]),
    ("take an capsule daily .", [R, Q, U, F, P]),
    ("take half tablet before meals .", [R, Q, U, F, P]),
    ("inhale 2 puffs as needed .", [R, Q, U, F, P]),
    ("apply patch once a day .", [R, U, F, P]),
    ("apply application at night .", [R, U, F, P]),
    ("take 1 tablet every day .", [R, Q, U, F, P]),
    ("take 1 tablet every 4 hours as needed .", [R, Q, U, F, F, P]),
    ("take 1 tablet by mouth .", [R, Q, U, X, X, P]),
])
def test_token_types(text, expected):
    assert types(text) == expected


def test_decimal_quantity():
    assert tokenize("take 1.5 ml daily.")[1] == Token(Q, "1.5")


def test_number_word_wins_over_times_a_day_phrase():
    toks = tokenize("take 1 tablet three times a day.")
    assert toks[3] == Token(Q, "three")
    assert toks[4] == Token(X, "times")


def test_route_has_priority_over_later_rules():
    assert PATTERN_TABLE[0].type is R
    assert tokenize("use")[0] == Token(R, "use")


def test_empty_text():
    assert tokenize("") == []


def test_tokens_cover_whole_input():
    text = "take 2 tablets every 6 hours as needed with lots of water."
    toks = tokenize(text)
    assert "".join(t.value for t in toks).replace(" ", "") == text.replace(" ", "")


def test_pattern_rule_match():
    unit = next(r for r in PATTERN_TABLE if r.type is U)
    assert unit.match("tablets daily") == "tablets"
    assert unit.match("take tablets") is None
    assert unit.match("take tablets", 5) == "tablets"
