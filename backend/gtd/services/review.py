"""Dashboard counts and the weekly review."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from gtd.models.owner import OwnerID
from gtd.models.task import Task, TaskStatus, to_utc, utcnow
from gtd.store.base import TaskStore

REVIEW_WINDOW = timedelta(days=7)


@dataclass(frozen=True)
class TaskStats:
    """Number of live tasks per GTD bucket."""

    total: int = 0
    inbox: int = 0
    next: int = 0
    waiting: int = 0
    scheduled: int = 0
    someday: int = 0
    done: int = 0
    projects: int = 0
    reference: int = 0


def collect_stats(store: TaskStore, owner: OwnerID | None = None) -> TaskStats:
    counts = store.count_by_status(owner)
    return TaskStats(
        total=sum(counts.values()),
        inbox=counts[TaskStatus.INBOX],
        next=counts[TaskStatus.NEXT],
        waiting=counts[TaskStatus.WAITING],
        scheduled=counts[TaskStatus.SCHEDULED],
        someday=counts[TaskStatus.SOMEDAY],
        done=counts[TaskStatus.DONE],
        projects=counts[TaskStatus.PROJECT],
        reference=counts[TaskStatus.REFERENCE],
    )


@dataclass
class WeeklyReview:
    """Everything a weekly review walks through, for one owner."""

    inbox: list[Task] = field(default_factory=list)
    waiting: list[Task] = field(default_factory=list)
    someday: list[Task] = field(default_factory=list)
    stalled_projects: list[Task] = field(default_factory=list)
    upcoming: list[Task] = field(default_factory=list)
    recently_completed: list[Task] = field(default_factory=list)

    @property
    def is_clear(self) -> bool:
        """True once the inbox is empty and every project has a next action."""
        return not self.inbox and not self.stalled_projects


def weekly_review(store: TaskStore, owner: OwnerID, now: datetime | None = None) -> WeeklyReview:
    """Collect the owner's tasks for the weekly review.

    Stalled projects are active projects without a ``next`` member task.
    Upcoming tasks are scheduled within the next seven days and recently
    completed ones were finished within the past seven days.
    """
    now = to_utc(now) if now is not None else utcnow()
    tasks = store.get_all_by_user_id(owner)

    by_status: dict[TaskStatus, list[Task]] = {status: [] for status in TaskStatus}
    for task in tasks:
        by_status[task.status].append(task)

    projects_with_next = {task.project_id for task in by_status[TaskStatus.NEXT] if task.project_id}

    return WeeklyReview(
        inbox=by_status[TaskStatus.INBOX],
        waiting=by_status[TaskStatus.WAITING],
        someday=by_status[TaskStatus.SOMEDAY],
        stalled_projects=[
            project for project in by_status[TaskStatus.PROJECT] if project.id not in projects_with_next
        ],
        upcoming=[
            task
            for task in by_status[TaskStatus.SCHEDULED]
            if task.scheduled_date is not None and now <= task.scheduled_date <= now + REVIEW_WINDOW
        ],
        recently_completed=[
            task
            for task in by_status[TaskStatus.DONE]
            if task.completed_at is not None and now - REVIEW_WINDOW <= task.completed_at <= now
        ],
    )
