"""Base services container for dependency injection."""

from config import Config
from reporting import build_reporter


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a different reporter for testing.

    Args:
        config: Application configuration object.
        reporter: Optional reporter. If provided, config.reporter is ignored.
    """

    def __init__(self, config: Config, reporter=None):
        self.config = config
        self.reporter = reporter or build_reporter(config.reporter)

        # Lazy import to avoid circular dependencies
        from services.accounts import AccountService

        self.accounts = AccountService(self.reporter)
