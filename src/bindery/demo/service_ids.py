from bindery.domain import token


class TYPES:
    """Service identifiers of the demo application."""

    SETTINGS = token("Settings")
    USER_REPOSITORY = token("UserRepository")
    EMAIL_SERVICE = token("EmailService")
    USER_SERVICE = token("UserService")
    REQUEST_CONTEXT = token("RequestContext")
