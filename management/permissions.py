# management/permissions.py

from rest_framework.permissions import BasePermission, SAFE_METHODS
from users.utils import log_user_action


class IsAuthor(BasePermission):
    """
    Allows modifying an object only to the user who wrote it.
    Reading stays open to every authenticated user.
    """

    message = 'Access denied: You can only modify your own comments'

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS:
            return True

        if obj.author_id == request.user.id:
            return True

        action = 'delete' if request.method == 'DELETE' else 'edit'
        self.message = f'Access denied: You can only {action} your own comments'

        log_user_action(
            user=request.user,
            action_name="Comments",
            description=f"User tried to {action} comment #{obj.pk} of another user",
            status='Access denied'
        )
        return False
