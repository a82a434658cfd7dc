"""Post-response background jobs.

Use cases schedule follow-up work (freshness invalidation, avatar fetch,
notifications) on a request-scoped queue; the router hands :meth:`run` to
FastAPI's ``BackgroundTasks`` so it executes after the response is sent.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

import logfire


@dataclass
class BackgroundJob:
    """A named coroutine call."""

    name: str
    func: Callable[..., Awaitable[Any]]
    args: tuple = ()
    kwargs: dict = field(default_factory=dict)


class BackgroundTaskQueue:
    """Ordered queue of jobs, each isolated from the others' failures."""

    def __init__(self) -> None:
        self.jobs: list[BackgroundJob] = []

    def schedule(
        self, name: str, func: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any
    ) -> None:
        """Queue a coroutine function to run after the response."""
        self.jobs.append(BackgroundJob(name=name, func=func, args=args, kwargs=kwargs))

    def __len__(self) -> int:
        return len(self.jobs)

    async def run(self) -> None:
        """Run every queued job in order.

        A failing job is logged and does not stop the remaining jobs.
        """
        jobs, self.jobs = self.jobs, []
        for job in jobs:
            with logfire.span("background.{name}", name=job.name):
                try:
                    await job.func(*job.args, **job.kwargs)
                except Exception:
                    logfire.exception("Background job failed", job=job.name)
