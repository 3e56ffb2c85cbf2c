from mvc_portfolio.utils.blog import filter_posts, tag_cloud
from mvc_portfolio.utils.sample_data import SAMPLE_POSTS

PUBLISHED = [post for post in SAMPLE_POSTS if post.published]


def test_filter_by_tag_is_case_insensitive():
    assert {p.id for p in filter_posts(PUBLISHED, tag="Architecture")} == {"1", "5"}


def test_search_covers_tags():
    assert [p.id for p in filter_posts(PUBLISHED, query="frontend")] == ["6"]


def test_tag_and_query_combine():
    assert [p.id for p in filter_posts(PUBLISHED, tag="fastapi", query="dependencies")] == ["4"]


def test_blank_query_keeps_everything():
    assert filter_posts(PUBLISHED, query="   ") == PUBLISHED


def test_tag_cloud_orders_by_count():
    cloud = tag_cloud(PUBLISHED)

    assert cloud[0] == ("architecture", 2)
    assert ("css", 1) in cloud
