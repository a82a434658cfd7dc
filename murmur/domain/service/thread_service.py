"""Thread assembly domain service."""

import logfire

from murmur.domain.model.comment import RootPage, ThreadedComment
from murmur.domain.repository import CommentRepository
from murmur.domain.value import SiteId

from .base import Service


class ThreadService(Service):
    """Composes root comment pages into thread previews.

    Each root is returned with the number of its direct replies and, at
    most, one promoted admin reply (the earliest one). Remaining replies
    are fetched on demand through cursor pagination, so listing a site
    never loads a whole discussion tree.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_root_page(
        self,
        site_id: SiteId,
        page: int,
        page_size: int,
        context_url: str | None = None,
    ) -> RootPage:
        """Get one page of thread previews for a site.

        Args:
            site_id: Site to list
            page: 1-based page number
            page_size: Roots per page
            context_url: Optional exact page URL filter

        Returns:
            Root page with reply counts, admin replies and the total root
            count for pagination
        """
        with logfire.span(
            "thread_service.get_root_page",
            site_id=site_id,
            page=page,
            context_url=context_url,
        ):
            roots, total = await self.comment_repository.find_root_page(
                site_id=site_id,
                page=page,
                page_size=page_size,
                context_url=context_url,
            )

            root_ids = [root.id for root in roots]
            reply_counts = {}
            admin_replies = {}
            if root_ids:
                reply_counts = await self.comment_repository.count_replies(root_ids)
                admin_replies = await self.comment_repository.find_first_admin_replies(
                    root_ids
                )

            comments = []
            for root in roots:
                admin_reply = admin_replies.get(root.id)
                comments.append(
                    ThreadedComment(
                        **root.to_public().model_dump(),
                        reply_count=reply_counts.get(root.id, 0),
                        admin_reply=admin_reply.to_public() if admin_reply else None,
                    )
                )

            logfire.info(
                "Root page assembled",
                site_id=site_id,
                page=page,
                count=len(comments),
                total=total,
            )
            return RootPage(
                comments=comments,
                total=total,
                page=page,
                page_size=page_size,
            )
