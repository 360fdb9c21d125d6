"""Shared state for the in-memory repositories.

Repositories built on one store see each other's rows, so deletes can
cascade the way the database foreign keys do.
"""

from dataclasses import dataclass, field

from alumni.domain.model import (
    Account,
    Comment,
    Event,
    EventRegistration,
    Post,
    PostLike,
    StaffMember,
)
from alumni.domain.value import (
    AccountId,
    CommentId,
    EventId,
    EventRegistrationId,
    PostId,
    PostLikeId,
    StaffId,
)


@dataclass
class InMemoryStore:
    """Rows of every table, keyed by primary key."""

    accounts: dict[AccountId, Account] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    likes: dict[PostLikeId, PostLike] = field(default_factory=dict)
    events: dict[EventId, Event] = field(default_factory=dict)
    registrations: dict[EventRegistrationId, EventRegistration] = field(
        default_factory=dict
    )
    staff: dict[StaffId, StaffMember] = field(default_factory=dict)

    def delete_post(self, post_id: PostId) -> bool:
        """Remove a post with its comments and likes."""
        if self.posts.pop(post_id, None) is None:
            return False
        for comment_id in [
            c.id for c in self.comments.values() if c.post_id == post_id
        ]:
            del self.comments[comment_id]
        for like_id in [
            like.id for like in self.likes.values() if like.post_id == post_id
        ]:
            del self.likes[like_id]
        return True

    def delete_event(self, event_id: EventId) -> bool:
        """Remove an event with its registrations."""
        if self.events.pop(event_id, None) is None:
            return False
        for registration_id in [
            r.id for r in self.registrations.values() if r.event_id == event_id
        ]:
            del self.registrations[registration_id]
        return True

    def delete_account(self, account_id: AccountId) -> None:
        """Remove an account and everything owned by it.

        Posts, registrations and staff entries go with the account. Comments
        and events stay, detached from their author.
        """
        del self.accounts[account_id]

        for post_id in [
            p.id for p in self.posts.values() if p.author_id == account_id
        ]:
            self.delete_post(post_id)

        for comment in list(self.comments.values()):
            if comment.author_id == account_id:
                self.comments[comment.id] = comment.model_copy(
                    update={"author_id": None}
                )

        for event in list(self.events.values()):
            if event.created_by == account_id:
                self.events[event.id] = event.model_copy(update={"created_by": None})

        for registration_id in [
            r.id for r in self.registrations.values() if r.user_id == account_id
        ]:
            del self.registrations[registration_id]

        for staff_id in [
            s.id for s in self.staff.values() if s.user_id == account_id
        ]:
            del self.staff[staff_id]
