from pawmate_client.session_cache import SessionCache

LOGIN_PATH = "/login"
HOME_PATH = "/"


def guard_user_route(cache: SessionCache) -> str | None:
    """Return a redirect path when no plausible session exists, else None."""
    if cache.load() is None:
        return LOGIN_PATH
    return None


def guard_admin_route(cache: SessionCache) -> str | None:
    session = cache.load()
    if session is None:
        return LOGIN_PATH
    if session.role != "admin":
        return HOME_PATH
    return None
