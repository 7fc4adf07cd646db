"""Tests for markup cleanup and tokenization."""

from rag_wordpress.text import clean_markup, tokenize


class TestCleanMarkup:
    def test_should_strip_tags_and_decode_entities(self):
        # When
        text = clean_markup('<b>Hi</b> &amp; &quot;bye&quot;')

        # Then
        assert text == 'Hi & "bye"'

    def test_should_remove_script_and_style_content(self):
        # Given
        raw = (
            "<p>Visible</p><script>alert('x')</script>"
            "<style>p { color: red; }</style><p>text</p>"
        )

        # When
        text = clean_markup(raw)

        # Then
        assert text == "Visibletext"
        assert "alert" not in text
        assert "color" not in text

    def test_should_collapse_whitespace(self):
        # When
        text = clean_markup("<p>  one\n\n two </p>\t<p>three&nbsp;four</p>  ")

        # Then
        assert text == "one two three four"

    def test_should_decode_double_encoded_entities(self):
        # Given - WordPress sometimes double-encodes ellipses and quotes
        raw = "<p>Wait&amp;hellip; it&amp;#039;s &amp;lt;here&amp;gt;</p>"

        # When
        text = clean_markup(raw)

        # Then
        assert text == "Wait... it's <here>"

    def test_should_return_empty_string_for_empty_input(self):
        assert clean_markup("") == ""
        assert clean_markup(None) == ""


class TestTokenize:
    def test_should_drop_short_tokens_and_keep_cyrillic(self):
        # When
        tokens = tokenize("Тест AI то е")

        # Then
        assert tokens == ["тест"]

    def test_should_lowercase_and_split_on_punctuation(self):
        # When
        tokens = tokenize("Fake-News, ДЕЗИНФОРМАЦИЯ! media...literacy")

        # Then
        assert tokens == ["fake", "news", "дезинформация", "media", "literacy"]

    def test_should_keep_digits_and_repeated_terms(self):
        # When
        tokens = tokenize("covid 2020 covid")

        # Then
        assert tokens == ["covid", "2020", "covid"]

    def test_should_return_empty_list_for_blank_text(self):
        assert tokenize("") == []
        assert tokenize("  ?! .. ") == []
