import logging

from app import config

logger = logging.getLogger(__name__)


def authenticate_admin(username, password) -> bool:
    """Check a login attempt against the single configured admin pair.

    This is a placeholder gate: plain string equality, nothing is issued
    and nothing is remembered between requests.
    """
    if username == config.ADMIN_USERNAME and password == config.ADMIN_PASSWORD:
        logger.info("Admin login succeeded for %s", username)
        return True
    logger.warning("Rejected login attempt for %r", username)
    return False
