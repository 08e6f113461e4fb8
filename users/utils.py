# users/utils.py

import logging

logger = logging.getLogger('users.actions')


def log_user_action(user, action_name, description, status='Success'):
    """
    Records a user's action in the application log.
    Successful actions go out at INFO, anything else at WARNING.
    """
    level = logging.INFO if status == 'Success' else logging.WARNING

    logger.log(
        level,
        "[%s] user=%s: %s (%s)",
        action_name,
        getattr(user, 'id', None),
        description,
        status,
    )
