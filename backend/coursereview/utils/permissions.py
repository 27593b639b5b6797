"""Role helpers shared by the subject and review routes."""

from coursereview.models.subject import Review
from coursereview.models.user import User


STUDENT = "student"
MODERATOR = "moderator"

ALL_ROLES = (STUDENT, MODERATOR)


def is_moderator(user: User) -> bool:
    return user.role == MODERATOR


def is_review_owner(review: Review, user: User) -> bool:
    return review.user_id == user.user_id


def can_edit_review(review: Review, user: User) -> bool:
    return is_review_owner(review, user)


def can_delete_review(review: Review, user: User) -> bool:
    return is_review_owner(review, user) or is_moderator(user)
