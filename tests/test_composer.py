"""Tests for answer composition."""

from rag_wordpress import messages
from rag_wordpress.composer import build_sources, compose, format_date
from rag_wordpress.types import Document, RankedDocument, Response, Source


def _make_ranked(
    title: str,
    excerpt: str = "",
    score: float = 0.5,
    date: str = "2024-03-05T10:00:00",
    link: str = "https://postvai.com/post",
    index: int = 0,
) -> RankedDocument:
    """Helper to create a RankedDocument for testing."""
    return RankedDocument(
        document=Document(
            id=index,
            title=title,
            content="",
            excerpt=excerpt,
            link=link,
            date=date,
        ),
        score=score,
        index=index,
    )


class TestCompose:
    def test_should_return_fixed_message_for_no_results(self):
        # When
        response = compose("въпрос", [])

        # Then
        assert response == Response(answer=messages.NO_RELEVANT_INFO, sources=[])

    def test_should_enumerate_titles_and_excerpts(self):
        # Given
        ranked = [
            _make_ranked("<b>Първа</b> статия", "<p>Кратко &amp; ясно</p>", 0.8),
            _make_ranked("Втора статия", "<p>Още текст</p>", 0.4, index=1),
        ]

        # When
        response = compose("статия", ranked)

        # Then
        lines = response.answer.split("\n")
        assert lines[0] == messages.RESULTS_BANNER.format(count=2)
        assert "**1. Първа статия**" in lines
        assert "Кратко & ясно" in lines
        assert "**2. Втора статия**" in lines
        assert "Още текст" in lines
        assert response.answer.endswith(messages.SOURCES_FOOTER)
        assert response.answer.index("Първа") < response.answer.index("Втора")

    def test_should_use_placeholder_for_missing_excerpt(self):
        # When
        response = compose("статия", [_make_ranked("Без резюме", excerpt="")])

        # Then
        assert messages.NO_SUMMARY in response.answer

    def test_should_build_parallel_sources(self):
        # Given
        ranked = [
            _make_ranked("Първа", score=0.8, link="https://postvai.com/a"),
            _make_ranked("Втора", score=0.4, link="https://postvai.com/b", date=""),
        ]

        # When
        response = compose("статия", ranked)

        # Then
        assert response.sources == [
            Source(title="Първа", link="https://postvai.com/a", similarity=0.8, date="5.03.2024 г."),
            Source(title="Втора", link="https://postvai.com/b", similarity=0.4, date=""),
        ]


class TestBuildSources:
    def test_should_clean_title_but_keep_raw_link(self):
        # When
        sources = build_sources(
            [_make_ranked("Tom &amp; Jerry", link="https://postvai.com/?p=1&amp=x")]
        )

        # Then
        assert sources[0].title == "Tom & Jerry"
        assert sources[0].link == "https://postvai.com/?p=1&amp=x"


class TestFormatDate:
    def test_should_format_wordpress_timestamp(self):
        assert format_date("2024-11-23T08:15:00") == "23.11.2024 г."

    def test_should_return_empty_string_for_missing_date(self):
        assert format_date("") == ""
        assert format_date(None) == ""

    def test_should_return_empty_string_for_unparseable_date(self):
        assert format_date("not a date") == ""

    def test_should_return_empty_string_for_non_string_date(self):
        assert format_date(20240305) == ""

    def test_should_keep_sources_when_one_date_is_unparseable(self):
        # When
        sources = build_sources(
            [_make_ranked("Първа", date="2024-03-05T10:00:00"), _make_ranked("Втора", date="??")]
        )

        # Then
        assert [s.date for s in sources] == ["5.03.2024 г.", ""]
