from curryclub.feed import FeedTab, build_feed, filter_feed, merge_feed
from curryclub.models import FeedKind
from curryclub.normalization import normalize_case_studies, normalize_news_posts


def test_merge_orders_by_extracted_date_across_sources():
    feed = build_feed(
        [{"title": "A", "date": "2024-01-01"}],
        [{"title": "B", "publishedAt": "2024-06-01"}],
    )
    assert [item.title for item in feed] == ["B", "A"]


def test_undated_items_sort_last_regardless_of_input_order():
    news = normalize_news_posts(
        [
            {"title": "no date"},
            {"title": "old", "date": "2019-05-01"},
            {"title": "bad date", "date": "coming soon"},
        ]
    )
    cases = normalize_case_studies([{"title": "new", "updatedAt": "2024-02-01"}])
    feed = merge_feed(news, cases)
    assert [item.title for item in feed] == ["new", "old", "no date", "bad date"]


def test_items_sharing_a_date_keep_input_order():
    feed = build_feed(
        [{"title": "first", "date": "2024-01-01"}, {"title": "second", "date": "2024-01-01"}],
        [{"title": "third", "date": "2024-01-01T00:00:00Z"}],
    )
    assert [item.title for item in feed] == ["first", "second", "third"]


def test_merge_handles_mixed_timezones():
    feed = build_feed(
        [{"title": "utc", "date": "2024-03-01T12:00:00Z"}],
        [{"title": "offset", "date": "2024-03-01T13:30:00+02:00"}],
    )
    assert [item.title for item in feed] == ["utc", "offset"]


def test_filter_feed_by_tab_preserves_order():
    feed = build_feed(
        [{"title": "n1", "date": "2024-05-01"}, {"title": "n2", "date": "2023-05-01"}],
        [{"title": "c1", "date": "2024-01-01"}],
    )
    assert [item.title for item in filter_feed(feed, FeedTab.ALL)] == ["n1", "c1", "n2"]
    assert [item.title for item in filter_feed(feed, "news")] == ["n1", "n2"]
    cases = filter_feed(feed, FeedTab.CASES)
    assert [item.title for item in cases] == ["c1"]
    assert all(item.kind is FeedKind.CASE_STUDY for item in cases)


def test_unknown_tab_shows_everything():
    feed = build_feed([{"title": "n"}], [{"title": "c"}])
    assert len(filter_feed(feed, "archive")) == 2
    assert FeedTab.parse(None) is FeedTab.ALL
    assert FeedTab.parse("CASES") is FeedTab.CASES


def test_empty_sources_yield_empty_feed():
    assert build_feed(None, []) == []


def test_feed_item_labels():
    item = build_feed([{"title": "n", "date": "2024-01-01"}], [])[0]
    assert item.kind_label == "News"
    assert item.date_label == "Jan 01, 2024"
    undated = build_feed([], [{"title": "c"}])[0]
    assert undated.kind_label == "Case Study"
    assert undated.date_label == ""


def test_unparseable_leading_date_sorts_as_undated():
    feed = build_feed(
        [{"title": "A", "date": "2024-01-01"}],
        [{"title": "B", "date": "TBC", "publishedAt": "2024-06-01"}],
    )
    assert [item.title for item in feed] == ["A", "B"]
    assert feed[1].date == ""


def test_editorial_date_formats_sort_with_iso_dates():
    feed = build_feed(
        [{"title": "iso", "date": "2024-02-01"}, {"title": "undated"}],
        [{"title": "written out", "date": "March 12, 2024"}, {"title": "slashed", "date": "2023/12/24"}],
    )
    assert [item.title for item in feed] == ["written out", "iso", "slashed", "undated"]
    assert feed[0].date_label == "Mar 12, 2024"
