"""Unit tests for comment forest reconstruction."""

from uuid import uuid4

from inkwell.domain.service import build_comment_tree
from inkwell.domain.value import ArticleId, CommentId
from tests.conftest import at, make_comment


def _shape(nodes) -> list:
    """Reduce a forest to nested (id, replies) tuples for comparison."""
    return [(node.comment.id, _shape(node.replies)) for node in nodes]


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_empty_input_gives_empty_forest(self):
        assert build_comment_tree([]) == []

    def test_replies_nest_under_root_oldest_first(self):
        """A root with two replies renders them in posting order."""
        # Arrange
        article_id = ArticleId(uuid4())
        root = make_comment(article_id, created_at=at(1))
        first = make_comment(article_id, parent_id=root.id, created_at=at(2))
        second = make_comment(article_id, parent_id=root.id, created_at=at(3))

        # Act - input order deliberately scrambled
        roots = build_comment_tree([second, root, first])

        # Assert
        assert len(roots) == 1
        assert roots[0].comment.id == root.id
        assert [r.comment.id for r in roots[0].replies] == [first.id, second.id]

    def test_roots_newest_first(self):
        """Two roots: the later one comes first."""
        article_id = ArticleId(uuid4())
        older = make_comment(article_id, created_at=at(1))
        newer = make_comment(article_id, created_at=at(2))

        roots = build_comment_tree([older, newer])

        assert [r.comment.id for r in roots] == [newer.id, older.id]
        assert all(r.replies == [] for r in roots)

    def test_orphan_is_dropped(self):
        """A reply whose parent is missing appears nowhere."""
        article_id = ArticleId(uuid4())
        root = make_comment(article_id, created_at=at(1))
        orphan = make_comment(
            article_id, parent_id=CommentId(uuid4()), created_at=at(2)
        )

        roots = build_comment_tree([root, orphan])

        assert _shape(roots) == [(root.id, [])]

    def test_orphan_subtree_is_dropped(self):
        """Replies beneath an orphan are unreachable too."""
        article_id = ArticleId(uuid4())
        orphan = make_comment(
            article_id, parent_id=CommentId(uuid4()), created_at=at(1)
        )
        child = make_comment(article_id, parent_id=orphan.id, created_at=at(2))

        assert build_comment_tree([orphan, child]) == []

    def test_every_comment_appears_once(self):
        """Each well-parented comment is reachable from exactly one root."""
        article_id = ArticleId(uuid4())
        r1 = make_comment(article_id, created_at=at(1))
        r2 = make_comment(article_id, created_at=at(2))
        a = make_comment(article_id, parent_id=r1.id, created_at=at(3))
        b = make_comment(article_id, parent_id=a.id, created_at=at(4))
        c = make_comment(article_id, parent_id=r2.id, created_at=at(5))
        comments = [r1, r2, a, b, c]

        roots = build_comment_tree(comments)

        seen = []
        pending = list(roots)
        while pending:
            node = pending.pop()
            seen.append(node.comment.id)
            pending.extend(node.replies)
        assert sorted(map(str, seen)) == sorted(str(x.id) for x in comments)
        assert sum(root.count() for root in roots) == len(comments)

    def test_read_path_imposes_no_depth_limit(self):
        """Chains deeper than the write limit still render in full."""
        article_id = ArticleId(uuid4())
        chain = [make_comment(article_id, created_at=at(0))]
        for i in range(1, 6):
            chain.append(
                make_comment(article_id, parent_id=chain[-1].id, created_at=at(i))
            )

        roots = build_comment_tree(chain)

        depth = 0
        node = roots[0]
        while node.replies:
            node = node.replies[0]
            depth += 1
        assert depth == 5

    def test_rebuild_is_deterministic(self):
        """Same input, including timestamp ties, gives the same forest."""
        article_id = ArticleId(uuid4())
        root = make_comment(article_id, created_at=at(1))
        tied = [
            make_comment(article_id, parent_id=root.id, created_at=at(2))
            for _ in range(4)
        ]
        tied_roots = [make_comment(article_id, created_at=at(3)) for _ in range(3)]
        comments = [root, *tied, *tied_roots]

        first = _shape(build_comment_tree(comments))
        second = _shape(build_comment_tree(list(reversed(comments))))

        assert first == second

    def test_count_includes_nested_replies(self):
        article_id = ArticleId(uuid4())
        root = make_comment(article_id, created_at=at(1))
        reply = make_comment(article_id, parent_id=root.id, created_at=at(2))
        nested = make_comment(article_id, parent_id=reply.id, created_at=at(3))

        roots = build_comment_tree([root, reply, nested])

        assert roots[0].count() == 3
        assert roots[0].replies[0].count() == 2
