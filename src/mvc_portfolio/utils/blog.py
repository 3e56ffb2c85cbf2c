"""Helpers for the public blog pages."""

from collections import Counter
from typing import List, Optional, Tuple

from mvc_portfolio.schemas.post import Post


def filter_posts(posts: List[Post], tag: Optional[str] = None, query: Optional[str] = None) -> List[Post]:
    """Keep posts carrying ``tag`` and matching ``query``.

    The query is matched case-insensitively against the title, the content
    and every tag.
    """
    if tag:
        wanted = tag.lower()
        posts = [post for post in posts if wanted in (t.lower() for t in post.tags)]
    if query and query.strip():
        term = query.strip().lower()
        posts = [
            post
            for post in posts
            if term in post.title.lower()
            or term in post.content.lower()
            or any(term in t.lower() for t in post.tags)
        ]
    return posts


def tag_cloud(posts: List[Post]) -> List[Tuple[str, int]]:
    """Tags with their post counts, most used first then alphabetical."""
    counts = Counter(tag for post in posts for tag in post.tags)
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))
