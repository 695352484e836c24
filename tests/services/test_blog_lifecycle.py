# tests/services/test_blog_lifecycle.py
"""Tests for the blog lifecycle rules and BlogService."""

from collections.abc import Callable
from uuid import uuid4

import pytest

from app.errors import BlogNotFoundError, DuplicateEntryError, NotAuthorizedError
from app.models import BlogDB, BlogState, UserDB
from app.repositories import BlogListQuery
from app.schemas.blog import BlogCreate, BlogUpdate
from app.services import BlogService, apply_changes, mark_published, new_draft
from tests.fakes import InMemoryBlogRepository, InMemoryUserRepository


@pytest.fixture
def service(blog_repo: InMemoryBlogRepository, user_repo: InMemoryUserRepository) -> BlogService:
    return BlogService(blog_repo, user_repo)  # type: ignore[arg-type]


def payload(title: str = "Hello", body: str = "word " * 10, **kwargs: object) -> BlogCreate:
    return BlogCreate(title=title, body=body, **kwargs)


class TestLifecycleRules:
    """Test cases for the pure lifecycle functions."""

    def test_new_draft(self) -> None:
        author_id = uuid4()
        blog = new_draft(author_id, payload(body="word " * 401, tags=["python"]))

        assert blog.state == BlogState.DRAFT
        assert blog.author_id == author_id
        assert blog.read_count == 0
        assert blog.reading_time == 3
        assert blog.tags == ["python"]

    def test_publish_is_idempotent(self) -> None:
        blog = new_draft(uuid4(), payload())

        mark_published(blog)
        mark_published(blog)

        assert blog.state == BlogState.PUBLISHED

    def test_body_change_recomputes_reading_time(self) -> None:
        blog = new_draft(uuid4(), payload(body="word " * 10))

        apply_changes(blog, BlogUpdate(body="word " * 250))

        assert blog.reading_time == 2

    def test_edit_to_very_short_body(self) -> None:
        blog = new_draft(uuid4(), payload(body="word " * 60))
        assert blog.reading_time >= 1

        apply_changes(blog, BlogUpdate(body="Very short now."))

        assert blog.reading_time == 1

    def test_edit_without_body_keeps_reading_time(self) -> None:
        blog = new_draft(uuid4(), payload(body="word " * 250))

        apply_changes(blog, BlogUpdate(title="Renamed"))

        assert blog.title == "Renamed"
        assert blog.reading_time == 2

    def test_empty_values_leave_fields_unchanged(self) -> None:
        blog = new_draft(uuid4(), payload(description="desc", tags=["a"]))

        apply_changes(blog, BlogUpdate(title="", description="", tags=[], body=""))

        assert blog.title == "Hello"
        assert blog.description == "desc"
        assert blog.tags == ["a"]
        assert blog.body == "word " * 10


class TestBlogServiceMutations:
    """Test cases for create, publish, edit and delete."""

    @pytest.mark.asyncio
    async def test_create_stores_a_draft(
        self,
        service: BlogService,
        blog_repo: InMemoryBlogRepository,
        sample_user: UserDB,
    ) -> None:
        blog = await service.create(sample_user.uuid, payload(body="word " * 60))

        assert blog_repo.blogs[blog.id] is blog
        assert blog.state == BlogState.DRAFT
        assert blog.reading_time == 1

    @pytest.mark.asyncio
    async def test_very_short_body_reads_in_one_minute(
        self,
        service: BlogService,
        sample_user: UserDB,
    ) -> None:
        blog = await service.create(sample_user.uuid, payload(body="Very short now."))
        assert blog.reading_time == 1

    @pytest.mark.asyncio
    async def test_duplicate_title(self, service: BlogService, sample_user: UserDB) -> None:
        await service.create(sample_user.uuid, payload(title="Taken"))

        with pytest.raises(DuplicateEntryError, match="Taken"):
            await service.create(sample_user.uuid, payload(title="Taken"))

    @pytest.mark.asyncio
    async def test_owner_can_publish(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog = blog_factory(sample_user)

        published = await service.publish(str(blog.id), sample_user.uuid)

        assert published.state == BlogState.PUBLISHED

    @pytest.mark.asyncio
    async def test_non_owner_cannot_publish(
        self,
        service: BlogService,
        sample_user: UserDB,
        other_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog = blog_factory(sample_user)

        with pytest.raises(NotAuthorizedError):
            await service.publish(blog.id, other_user.uuid)

        assert blog.state == BlogState.DRAFT

    @pytest.mark.asyncio
    async def test_edit_rejects_another_blogs_title(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog_factory(sample_user, title="First")
        second = blog_factory(sample_user, title="Second")

        with pytest.raises(DuplicateEntryError):
            await service.edit(second.id, sample_user.uuid, BlogUpdate(title="First"))

    @pytest.mark.asyncio
    async def test_edit_keeping_own_title(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog = blog_factory(sample_user, title="Same")

        edited = await service.edit(blog.id, sample_user.uuid, BlogUpdate(title="Same", body="new"))

        assert edited.body == "new"

    @pytest.mark.asyncio
    async def test_non_owner_cannot_edit(
        self,
        service: BlogService,
        sample_user: UserDB,
        other_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog = blog_factory(sample_user, title="Mine")

        with pytest.raises(NotAuthorizedError):
            await service.edit(blog.id, other_user.uuid, BlogUpdate(title="Theirs"))

        assert blog.title == "Mine"

    @pytest.mark.asyncio
    async def test_delete_then_not_found(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog = blog_factory(sample_user, state=BlogState.PUBLISHED)

        await service.delete(blog.id, sample_user.uuid)

        with pytest.raises(BlogNotFoundError):
            await service.get_published(blog.id)
        with pytest.raises(BlogNotFoundError):
            await service.delete(blog.id, sample_user.uuid)

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(
        self,
        service: BlogService,
        blog_repo: InMemoryBlogRepository,
        sample_user: UserDB,
        other_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog = blog_factory(sample_user)

        with pytest.raises(NotAuthorizedError):
            await service.delete(blog.id, other_user.uuid)

        assert blog.id in blog_repo.blogs

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blog_id", ["not-a-uuid", str(uuid4())])
    async def test_unknown_or_malformed_id(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_id: str,
    ) -> None:
        with pytest.raises(BlogNotFoundError):
            await service.publish(blog_id, sample_user.uuid)


class TestBlogServiceReads:
    """Test cases for public reads and listings."""

    @pytest.mark.asyncio
    async def test_each_read_counts_once(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog = blog_factory(sample_user, state=BlogState.PUBLISHED)

        for _ in range(3):
            returned, author = await service.get_published(str(blog.id))

        assert returned.read_count == 3
        assert author is sample_user

    @pytest.mark.asyncio
    async def test_draft_is_not_readable(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog = blog_factory(sample_user)

        with pytest.raises(BlogNotFoundError):
            await service.get_published(blog.id)

        assert blog.read_count == 0

    @pytest.mark.asyncio
    async def test_public_listing_hides_drafts(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        published = blog_factory(sample_user, title="Out", state=BlogState.PUBLISHED)
        blog_factory(sample_user, title="In progress")

        listing = await service.list_published(BlogListQuery())

        assert listing.blogs == [published]
        assert listing.authors == {sample_user.uuid: sample_user}
        assert listing.total_pages == 1
        assert listing.current_page == 1

    @pytest.mark.asyncio
    async def test_search_by_author_first_name(
        self,
        service: BlogService,
        sample_user: UserDB,
        other_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        mine = blog_factory(sample_user, title="Engines", state=BlogState.PUBLISHED)
        blog_factory(other_user, title="Compilers", state=BlogState.PUBLISHED)

        listing = await service.list_published(BlogListQuery(search="ada"))

        assert listing.blogs == [mine]

    @pytest.mark.asyncio
    async def test_search_by_tag(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        tagged = blog_factory(
            sample_user,
            title="One",
            tags=["Python"],
            state=BlogState.PUBLISHED,
        )
        blog_factory(sample_user, title="Two", tags=["rust"], state=BlogState.PUBLISHED)

        listing = await service.list_published(BlogListQuery(search="pyth"))

        assert listing.blogs == [tagged]

    @pytest.mark.asyncio
    async def test_limit_and_total_pages(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        for i in range(5):
            blog_factory(sample_user, title=f"Post {i}", state=BlogState.PUBLISHED)

        listing = await service.list_published(BlogListQuery(page=3, limit=2))

        assert len(listing.blogs) == 1
        assert listing.total_pages == 3
        assert listing.current_page == 3

    @pytest.mark.asyncio
    async def test_order_by_read_count(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        low = blog_factory(sample_user, title="Low", read_count=1, state=BlogState.PUBLISHED)
        high = blog_factory(sample_user, title="High", read_count=9, state=BlogState.PUBLISHED)

        listing = await service.list_published(BlogListQuery(order_by="read_count"))

        assert listing.blogs == [high, low]

    @pytest.mark.asyncio
    async def test_own_listing_includes_drafts_only_for_owner(
        self,
        service: BlogService,
        sample_user: UserDB,
        other_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        draft = blog_factory(sample_user, title="Draft")
        blog_factory(other_user, title="Not mine")

        listing = await service.list_own(sample_user.uuid, page=1, limit=20)

        assert listing.blogs == [draft]
        assert listing.authors == {}

    @pytest.mark.asyncio
    async def test_own_listing_state_filter(
        self,
        service: BlogService,
        sample_user: UserDB,
        blog_factory: Callable[..., BlogDB],
    ) -> None:
        blog_factory(sample_user, title="Draft")
        published = blog_factory(sample_user, title="Live", state=BlogState.PUBLISHED)

        listing = await service.list_own(sample_user.uuid, page=1, limit=20, state="published")

        assert listing.blogs == [published]
