"""
Blog post search.
"""

from collections.abc import Iterable

from .models import BlogPost


def _matches_text(post: BlogPost, needle: str) -> bool:
    return (
        needle in post.title.lower()
        or needle in post.excerpt.lower()
        or any(needle in tag.lower() for tag in post.tags)
    )


def filter_posts(
    posts: Iterable[BlogPost], search_text: str = "", category: str = "all"
) -> list[BlogPost]:
    """
    Filter posts by search text and category, keeping their order.

    The search is case-insensitive over title, excerpt and tags and is skipped
    when empty; the category filter is skipped for "all".
    """
    filtered = list(posts)

    if search_text:
        needle = search_text.lower()
        filtered = [post for post in filtered if _matches_text(post, needle)]

    if category != "all":
        filtered = [post for post in filtered if post.category == category]

    return filtered
