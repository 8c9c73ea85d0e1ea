"""
Tests for blog post search.
"""

from soulsync.blog import filter_posts
from soulsync.models import BlogPost

POSTS = [
    BlogPost(
        title="Understanding Gen Z's Mental Health Crisis",
        slug="gen-z",
        excerpt="Challenges facing Gen Z.",
        tags=["mental health", "anxiety"],
        category="mental_health",
    ),
    BlogPost(
        title="Beat Social Media Anxiety",
        slug="social-media",
        excerpt="Keep a healthy relationship with your feed.",
        tags=["social media", "tips"],
        category="tips",
    ),
    BlogPost(
        title="The Power of Micro-Meditation",
        slug="micro-meditation",
        excerpt="Short practices for stress relief.",
        tags=["meditation", "wellness"],
        category="wellness",
    ),
]


class TestFilterPosts:
    """Test suite for filter_posts."""

    def test_no_filters_keeps_order(self):
        assert filter_posts(POSTS) == POSTS

    def test_search_is_case_insensitive_over_title_excerpt_and_tags(self):
        def slugs(text):
            return [p.slug for p in filter_posts(POSTS, search_text=text)]

        assert slugs("ANXIETY") == ["gen-z", "social-media"]
        assert slugs("stress relief") == ["micro-meditation"]
        assert slugs("Meditation") == ["micro-meditation"]
        assert slugs("nothing like this") == []

    def test_category_filter(self):
        assert [p.slug for p in filter_posts(POSTS, category="wellness")] == [
            "micro-meditation"
        ]
        assert filter_posts(POSTS, category="stories") == []

    def test_filters_combine(self):
        assert [p.slug for p in filter_posts(POSTS, "anxiety", "tips")] == [
            "social-media"
        ]
        assert filter_posts(POSTS, "meditation", "tips") == []
