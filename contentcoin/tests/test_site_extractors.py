"""
Tests for platform extractors and the scrape dispatcher.
"""

import pytest
from bs4 import BeautifulSoup

from contentcoin.fetcher import (
    BROWSER_PROFILE,
    SOCIAL_PROFILE,
    FetchConnectionError,
    FetchTimeoutError,
    UpstreamHTTPError,
)
from contentcoin.platform_detector import PlatformType, detect_platform
from contentcoin.scraper import scrape_url
from contentcoin.site_extractors import (
    MAX_CONTENT_LENGTH,
    PLATFORM_EXTRACTORS,
    BlogExtractor,
    GitHubExtractor,
    InstagramExtractor,
    MediumExtractor,
    SubstackExtractor,
    TikTokExtractor,
    TwitterExtractor,
    YouTubeExtractor,
    get_extractor_for_platform,
    scrape_by_platform,
)
from contentcoin.site_extractors.base import first_match, first_text, meta_name, meta_property

from .conftest import FakeFetcher


def page(head: str = "", body: str = "") -> str:
    return f"<html><head>{head}</head><body>{body}</body></html>"


class TestFirstMatch:
    """The ordered-candidates combinator shared by every field."""

    def test_returns_first_non_empty(self):
        soup = BeautifulSoup(page(
            head='<meta property="og:title" content="  ">'
                 '<meta name="title" content="Meta Title">',
            body="<h1>Heading</h1>",
        ), "html.parser")
        candidates = (meta_property("og:title"), meta_name("title"), first_text("h1"))
        assert first_match(soup, candidates) == "Meta Title"

    def test_falls_back_to_default(self):
        soup = BeautifulSoup(page(), "html.parser")
        assert first_match(soup, (meta_property("og:title"),), "Default") == "Default"

    def test_empty_candidates_give_default(self):
        soup = BeautifulSoup(page(), "html.parser")
        assert first_match(soup, (), "") == ""


class TestDefaultTitles:
    """Title is never empty: each platform has a default."""

    @pytest.mark.asyncio
    async def test_youtube_without_og_title(self):
        fetcher = FakeFetcher(page(body="<p>nothing useful</p>"))
        result = await YouTubeExtractor(fetcher).extract("https://www.youtube.com/watch?v=abc")
        assert result.title == "YouTube Content"
        assert result.platform == PlatformType.YOUTUBE

    @pytest.mark.asyncio
    @pytest.mark.parametrize("platform", list(PlatformType))
    async def test_every_platform_has_non_empty_title(self, platform):
        fetcher = FakeFetcher("<html><body></body></html>")
        extractor = get_extractor_for_platform(platform, fetcher)
        result = await extractor.extract("https://example.com/page")
        assert result.title
        assert result.platform == platform

    @pytest.mark.asyncio
    async def test_missing_fields_are_empty_strings(self):
        fetcher = FakeFetcher("<html></html>")
        result = await MediumExtractor(fetcher).extract("https://medium.com/@a/b")
        assert result.description == ""
        assert result.author == ""
        assert result.image == ""
        assert result.publish_date == ""
        assert result.tags == []


class TestYouTubeExtractor:

    @pytest.mark.asyncio
    async def test_reads_open_graph_and_channel(self):
        fetcher = FakeFetcher(page(
            head='<meta property="og:title" content="Great Video">'
                 '<meta property="og:description" content="About the video">'
                 '<meta property="og:image" content="https://i.ytimg.com/vi/abc/hq.jpg">',
            body='<span itemprop="author"><link itemprop="name" content="Some Channel"></span>',
        ))
        result = await YouTubeExtractor(fetcher).extract("https://www.youtube.com/watch?v=abc")
        assert result.title == "Great Video"
        assert result.description == "About the video"
        assert result.author == "Some Channel"
        assert result.image == "https://i.ytimg.com/vi/abc/hq.jpg"
        # No article body: description doubles as content
        assert result.content == "About the video"

    @pytest.mark.asyncio
    async def test_uses_browser_profile(self):
        fetcher = FakeFetcher(page())
        await YouTubeExtractor(fetcher).extract("https://youtu.be/abc")
        assert fetcher.calls == [("https://youtu.be/abc", BROWSER_PROFILE)]


class TestMediumExtractor:

    @pytest.mark.asyncio
    async def test_og_title_and_published_time(self):
        fetcher = FakeFetcher(page(
            head='<meta property="og:title" content="My Post">'
                 '<meta property="article:published_time" content="2024-01-01T00:00:00Z">'
                 '<meta name="author" content="Ada Lovelace">'
                 '<meta property="article:tag" content="python">'
                 '<meta property="article:tag" content="scraping">',
            body="<h1>Other Heading</h1><article><p>Body text of the post.</p></article>",
        ))
        result = await MediumExtractor(fetcher).extract("https://medium.com/@ada/my-post")
        assert result.title == "My Post"
        assert result.publish_date == "2024-01-01T00:00:00Z"
        assert result.author == "Ada Lovelace"
        assert result.tags == ["python", "scraping"]
        assert result.content == "Body text of the post."

    @pytest.mark.asyncio
    async def test_falls_back_to_h1_then_default(self):
        fetcher = FakeFetcher(page(body="<h1>Heading Title</h1>"))
        result = await MediumExtractor(fetcher).extract("https://medium.com/p/1")
        assert result.title == "Heading Title"

        fetcher.html = page(body="<p>no heading</p>")
        result = await MediumExtractor(fetcher).extract("https://medium.com/p/1")
        assert result.title == "Medium Article"

    @pytest.mark.asyncio
    async def test_strips_noise_from_content(self):
        fetcher = FakeFetcher(page(body=(
            "<article><header>Site Header</header><p>Real words.</p>"
            "<script>var tracking = 1;</script><style>p{}</style>"
            "<nav>Menu</nav><footer>Copyright</footer>"
            '<div class="advertisement">Buy now</div></article>'
        )))
        result = await MediumExtractor(fetcher).extract("https://medium.com/p/1")
        assert result.content == "Real words."

    @pytest.mark.asyncio
    async def test_falls_back_to_main(self):
        fetcher = FakeFetcher(page(body="<main><p>Main text</p></main>"))
        result = await MediumExtractor(fetcher).extract("https://medium.com/p/1")
        assert result.content == "Main text"

    @pytest.mark.asyncio
    async def test_joins_every_article(self):
        fetcher = FakeFetcher(page(body=(
            "<article>First section of the story.</article>"
            "<article>Second section of the story.</article>"
        )))
        result = await MediumExtractor(fetcher).extract("https://medium.com/p/1")
        assert result.content == "First section of the story. Second section of the story."

    @pytest.mark.asyncio
    async def test_title_read_before_header_is_stripped(self):
        fetcher = FakeFetcher(page(body="<header><h1>Header Title</h1></header><article>x</article>"))
        result = await MediumExtractor(fetcher).extract("https://medium.com/p/1")
        assert result.title == "Header Title"


class TestSubstackExtractor:

    @pytest.mark.asyncio
    async def test_reads_time_and_body(self):
        fetcher = FakeFetcher(page(
            head='<meta property="og:title" content="Issue #12">'
                 '<meta name="author" content="Newsletter Author">',
            body='<time datetime="2024-03-05T10:00:00Z">Mar 5</time>'
                 '<div class="body"><p>Newsletter body.</p>'
                 '<div class="subscription-widget">Subscribe</div></div>',
        ))
        result = await SubstackExtractor(fetcher).extract("https://a.substack.com/p/issue-12")
        assert result.title == "Issue #12"
        assert result.author == "Newsletter Author"
        assert result.publish_date == "2024-03-05T10:00:00Z"
        assert result.content == "Newsletter body."


class TestGitHubExtractor:

    @pytest.mark.asyncio
    async def test_readme_content_and_username(self):
        fetcher = FakeFetcher(page(
            head='<meta property="og:title" content="python/cpython">'
                 '<meta property="profile:username" content="python">',
            body='<div id="readme"><article class="markdown-body"><h1>CPython</h1>'
                 "<p>The Python interpreter.</p></article></div>",
        ))
        result = await GitHubExtractor(fetcher).extract("https://github.com/python/cpython")
        assert result.title == "python/cpython"
        assert result.author == "python"
        assert result.content == "CPython The Python interpreter."

    @pytest.mark.asyncio
    async def test_author_defaults_to_repo_owner(self):
        fetcher = FakeFetcher(page())
        result = await GitHubExtractor(fetcher).extract("https://github.com/octocat/hello")
        assert result.author == "octocat"
        assert result.title == "GitHub Project"

    @pytest.mark.asyncio
    async def test_rate_limit_propagates(self):
        """GitHub has no rate-limit fallback, unlike the social platforms. Known gap."""
        fetcher = FakeFetcher(error=UpstreamHTTPError(429, "https://github.com/a/b"))
        with pytest.raises(UpstreamHTTPError) as exc_info:
            await GitHubExtractor(fetcher).extract("https://github.com/a/b")
        assert exc_info.value.status == 429


class TestBlogExtractor:

    @pytest.mark.asyncio
    async def test_short_article_falls_back_to_body(self):
        """A matching container with 100 chars or less is not trusted."""
        body_text = "Lorem ipsum dolor sit amet. " * 18  # ~500 chars
        fetcher = FakeFetcher(page(body=(
            "<article>Too short.</article>"
            f"<div class='wrapper'><p>{body_text}</p></div>"
        )))
        result = await BlogExtractor(fetcher).extract("https://example.com/post")
        assert result.content.startswith("Too short. Lorem ipsum")
        assert len(result.content) > 400

    @pytest.mark.asyncio
    async def test_long_article_wins(self):
        article_text = "Article sentence here. " * 10
        fetcher = FakeFetcher(page(body=(
            f"<div class='sidebar-outer'>Outside</div><article>{article_text}</article>"
        )))
        result = await BlogExtractor(fetcher).extract("https://example.com/post")
        assert result.content == article_text.strip()

    @pytest.mark.asyncio
    async def test_several_short_articles_count_together(self):
        """The length check applies to the text of all matches combined."""
        first = "First section of the story with several words in it."
        second = "Second section of the story, also with a few words."
        fetcher = FakeFetcher(page(body=(
            "<div class='promo'>Subscribe to our newsletter today</div>"
            f"<article>{first}</article><article>{second}</article>"
        )))
        result = await BlogExtractor(fetcher).extract("https://example.com/post")
        assert result.content == f"{first} {second}"
        assert "newsletter" not in result.content

    @pytest.mark.asyncio
    async def test_cascade_priority_order(self):
        entry = "Entry content words. " * 10
        post = "Post content words. " * 10
        fetcher = FakeFetcher(page(body=(
            f"<div class='entry-content'>{entry}</div><div class='post-content'>{post}</div>"
        )))
        result = await BlogExtractor(fetcher).extract("https://example.com/post")
        assert result.content == post.strip()

    @pytest.mark.asyncio
    async def test_metadata_fallbacks(self):
        fetcher = FakeFetcher(page(
            head="<title>Page Title</title>"
                 '<meta property="og:title" content="OG Title">'
                 '<meta property="og:description" content="OG description">'
                 '<meta property="article:author" content="Jane Doe">'
                 '<meta name="keywords" content="web, python , ,scraping">',
            body='<time datetime="2023-06-01">June</time><img src="/hero.png">',
        ))
        result = await BlogExtractor(fetcher).extract("https://example.com/post")
        assert result.title == "Page Title"
        assert result.description == "OG description"
        assert result.author == "Jane Doe"
        assert result.publish_date == "2023-06-01"
        assert result.image == "/hero.png"
        assert result.tags == ["web", "python", "scraping"]

    @pytest.mark.asyncio
    async def test_default_title(self):
        fetcher = FakeFetcher(page(body="<p>text</p>"))
        result = await BlogExtractor(fetcher).extract("https://example.com/post")
        assert result.title == "Web Content"

    @pytest.mark.asyncio
    async def test_collapses_whitespace(self):
        fetcher = FakeFetcher(page(body="<p>one\n\n   two\t three</p>"))
        result = await BlogExtractor(fetcher).extract("https://example.com/post")
        assert result.content == "one two three"

    @pytest.mark.asyncio
    async def test_strips_clutter_from_body(self):
        fetcher = FakeFetcher(page(body=(
            "<p>Kept</p><div class='comments'>Nice post!</div>"
            "<div class='ad'>Ad</div><div class='social-share'>Share</div>"
        )))
        result = await BlogExtractor(fetcher).extract("https://example.com/post")
        assert result.content == "Kept"


class TestContentTruncation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("extractor_class", [BlogExtractor, MediumExtractor, GitHubExtractor])
    async def test_content_is_truncated(self, extractor_class):
        long_text = "word " * 5000
        html = page(body=(
            f"<article class='markdown-body'>{long_text}</article>"
        ))
        result = await extractor_class(FakeFetcher(html)).extract("https://example.com/x")
        assert len(result.content) == MAX_CONTENT_LENGTH

    @pytest.mark.asyncio
    @pytest.mark.parametrize("platform", list(PlatformType))
    async def test_no_platform_exceeds_limit(self, platform):
        long_text = "x" * (MAX_CONTENT_LENGTH * 2)
        html = page(
            head=f'<meta property="og:description" content="{long_text}">'
                 f'<meta name="description" content="{long_text}">',
            body=f"<main>{long_text}</main>",
        )
        extractor = get_extractor_for_platform(platform, FakeFetcher(html))
        result = await extractor.extract("https://example.com/x")
        assert len(result.content) <= MAX_CONTENT_LENGTH


class TestSocialRateLimitFallback:
    """TikTok, Instagram and X return a placeholder instead of failing on 429."""

    @pytest.mark.asyncio
    async def test_instagram_429_returns_placeholder(self):
        url = "https://www.instagram.com/someuser"
        fetcher = FakeFetcher(error=UpstreamHTTPError(429, url))
        result = await InstagramExtractor(fetcher).extract(url)
        assert result.author == "someuser"
        assert "@someuser" in result.title
        assert result.platform == PlatformType.INSTAGRAM
        assert result.image == ""
        assert "rate limited" in result.description

    @pytest.mark.asyncio
    async def test_tiktok_429_uses_handle(self):
        url = "https://www.tiktok.com/@dancer/video/7000"
        fetcher = FakeFetcher(error=UpstreamHTTPError(429, url))
        result = await TikTokExtractor(fetcher).extract(url)
        assert result.author == "dancer"
        assert result.title == "TikTok - @dancer"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", ["https://twitter.com/jack/status/20", "https://x.com/jack"])
    async def test_twitter_429_uses_username(self, url):
        fetcher = FakeFetcher(error=UpstreamHTTPError(429, url))
        result = await TwitterExtractor(fetcher).extract(url)
        assert result.author == "jack"
        assert result.title == "Twitter/X - @jack"
        assert result.content == "Profile for @jack"

    @pytest.mark.asyncio
    async def test_missing_username_defaults_to_user(self):
        url = "https://www.tiktok.com/"
        fetcher = FakeFetcher(error=UpstreamHTTPError(429, url))
        result = await TikTokExtractor(fetcher).extract(url)
        assert result.author == "user"

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self):
        url = "https://www.instagram.com/someuser"
        fetcher = FakeFetcher(error=UpstreamHTTPError(403, url))
        with pytest.raises(UpstreamHTTPError):
            await InstagramExtractor(fetcher).extract(url)

    @pytest.mark.asyncio
    async def test_timeout_propagates(self):
        fetcher = FakeFetcher(error=FetchTimeoutError("slow"))
        with pytest.raises(FetchTimeoutError):
            await TwitterExtractor(fetcher).extract("https://x.com/jack")

    @pytest.mark.asyncio
    async def test_uses_social_profile(self):
        fetcher = FakeFetcher(page())
        await InstagramExtractor(fetcher).extract("https://www.instagram.com/someuser")
        _, profile = fetcher.calls[0]
        assert profile is SOCIAL_PROFILE
        assert profile.max_redirects == 5
        assert {"Accept", "Accept-Language", "Referer"} <= set(profile.headers)

    @pytest.mark.asyncio
    async def test_successful_fetch_reads_meta(self):
        fetcher = FakeFetcher(page(
            head='<meta property="og:title" content="Jack on X">'
                 '<meta property="og:description" content="just setting up my twttr">',
        ))
        result = await TwitterExtractor(fetcher).extract("https://x.com/jack/status/20")
        assert result.title == "Jack on X"
        assert result.content == "just setting up my twttr"
        assert result.author == "jack"


class TestDispatcher:

    def test_routing_table_covers_every_platform(self):
        assert set(PLATFORM_EXTRACTORS) == set(PlatformType)
        for platform, extractor_class in PLATFORM_EXTRACTORS.items():
            assert extractor_class.PLATFORM == platform

    def test_routing_table_is_read_only(self):
        with pytest.raises(TypeError):
            PLATFORM_EXTRACTORS[PlatformType.BLOG] = MediumExtractor

    def test_unknown_tag_routes_to_blog(self):
        assert isinstance(get_extractor_for_platform("myspace"), BlogExtractor)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/@creator",
        "https://open.spotify.com/album/abc",
        "https://medium.com/@a/post",
        "https://x.substack.com/p/post",
        "https://grants.gitcoin.co/round",
        "https://giveth.io/project/p",
        "https://www.tiktok.com/@a",
        "https://www.instagram.com/a",
        "https://x.com/a",
        "https://github.com/a/b",
        "https://warpcast.com/a",
        "https://www.twitch.tv/a",
        "https://example.com/a",
    ])
    async def test_round_trip_platform_matches_classification(self, url):
        fetcher = FakeFetcher(page(head='<meta property="og:title" content="T">'))
        result = await scrape_by_platform(url, detect_platform(url).type, fetcher)
        assert result.platform == detect_platform(url).type
        assert len(fetcher.calls) == 1

    @pytest.mark.asyncio
    async def test_errors_propagate_unchanged(self):
        error = FetchConnectionError("dns failure")
        fetcher = FakeFetcher(error=error)
        with pytest.raises(FetchConnectionError) as exc_info:
            await scrape_by_platform("https://example.com", PlatformType.BLOG, fetcher)
        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_scrape_url_classifies_and_dispatches(self):
        fetcher = FakeFetcher(page(head='<meta property="og:title" content="Repo">'))
        result = await scrape_url("https://github.com/a/b", fetcher)
        assert result.platform == PlatformType.GITHUB
        assert result.title == "Repo"
