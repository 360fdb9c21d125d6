"""Domain services."""

from .account_lifecycle import apply_transition, authorize_actor, authorize_transition
from .account_service import AccountService, generate_staff_password
from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentThread, CommentTreeNode, build_comment_tree
from .event_service import EventService
from .jwt_service import JWTService
from .post_service import PostService
from .staff_service import StaffService

__all__ = [
    "AccountService",
    "CommentService",
    "CommentThread",
    "CommentTreeNode",
    "EventService",
    "JWTService",
    "PostService",
    "Service",
    "StaffService",
    "apply_transition",
    "authorize_actor",
    "authorize_transition",
    "build_comment_tree",
    "generate_staff_password",
]
