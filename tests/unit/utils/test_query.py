from atlassian_console.utils.query import quote_query_value


def test_quote_plain_value():
    assert quote_query_value("TEST") == '"TEST"'


def test_quote_escapes_quotes_and_backslashes():
    assert quote_query_value('say "hi" \\ bye') == '"say \\"hi\\" \\\\ bye"'


def test_quote_cannot_close_literal_early():
    quoted = quote_query_value('X" OR project = "SECRET')

    assert quoted == '"X\\" OR project = \\"SECRET"'
