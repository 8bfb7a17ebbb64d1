from curlgen.parser.tokenize import tokenize


class TestTokenize:
    def test_single_quoted_group(self):
        assert tokenize("a 'b c' d") == ["a", "b c", "d"]

    def test_double_quoted_group(self):
        assert tokenize('-H "Accept: text/html"') == ["-H", "Accept: text/html"]

    def test_repeated_spaces_are_collapsed(self):
        assert tokenize("a    b") == ["a", "b"]

    def test_unterminated_quote_runs_to_end(self):
        assert tokenize("a 'b c d") == ["a", "b c d"]

    def test_escaped_quote_is_literal(self):
        assert tokenize("it\\'s fine") == ["it's", "fine"]

    def test_backslash_is_literal_inside_single_quotes(self):
        assert tokenize("'a\\b'") == ["a\\b"]

    def test_escape_inside_double_quotes(self):
        assert tokenize('"say \\"hi\\""') == ['say "hi"']

    def test_single_quote_inside_double_quotes(self):
        assert tokenize("\"it's\"") == ["it's"]

    def test_escaped_space_joins_token(self):
        assert tokenize("a\\ b") == ["a b"]

    def test_shell_encoded_single_quote(self):
        assert tokenize("'it'\\''s'") == ["it's"]

    def test_tabs_are_not_separators(self):
        assert tokenize("a\tb") == ["a\tb"]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []
