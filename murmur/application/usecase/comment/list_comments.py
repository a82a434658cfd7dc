"""List root comments use case."""

import logfire
from pydantic import BaseModel, ConfigDict, Field

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.error import ValidationError
from murmur.domain.model import ThreadedComment
from murmur.domain.service import FreshnessService, ThreadService
from murmur.domain.value import SiteId


class ListCommentsRequest(BaseModel):
    """List root comments request."""

    site_id: str | None = None
    page: int = Field(default=1, ge=1)
    context_url: str | None = None
    if_modified_since: str | None = None


class CommentPage(BaseModel):
    """One page of thread previews, in the widget's wire format."""

    model_config = ConfigDict(populate_by_name=True)

    comments: list[ThreadedComment]
    total: int
    page: int
    page_size: int = Field(serialization_alias="pageSize")


class ListCommentsResponse(BaseModel):
    """List root comments response.

    ``page`` is None when the client's copy is still current.
    """

    last_modified: str
    not_modified: bool = False
    page: CommentPage | None = None


class ListCommentsUseCase(BaseUseCase[ListCommentsRequest, ListCommentsResponse]):
    """Use case for the public, conditionally cached root listing."""

    def __init__(
        self,
        thread_service: ThreadService,
        freshness_service: FreshnessService,
        page_size: int,
    ) -> None:
        """Initialize list comments use case.

        Args:
            thread_service: Thread assembly domain service
            freshness_service: Freshness token domain service
            page_size: Root comments per page
        """
        self.thread_service = thread_service
        self.freshness_service = freshness_service
        self.page_size = page_size

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        A conditional request whose date equals the site's token is answered
        without touching the comment store.

        Raises:
            ValidationError: If site_id is missing
        """
        if not request.site_id:
            raise ValidationError("Missing site_id")
        site_id = SiteId(request.site_id)

        if await self.freshness_service.is_not_modified(
            site_id, request.if_modified_since
        ):
            logfire.debug("Root listing not modified", site_id=site_id)
            return ListCommentsResponse(
                last_modified=request.if_modified_since, not_modified=True
            )

        # Token before data: a concurrent write can leave the served token
        # older than the data, never newer
        token = await self.freshness_service.current_token(site_id)
        root_page = await self.thread_service.get_root_page(
            site_id=site_id,
            page=request.page,
            page_size=self.page_size,
            context_url=request.context_url or None,
        )

        return ListCommentsResponse(
            last_modified=token,
            page=CommentPage(
                comments=root_page.comments,
                total=root_page.total,
                page=root_page.page,
                page_size=root_page.page_size,
            ),
        )
