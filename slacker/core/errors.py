class SlackerError(Exception):
    """Base class for notifier failures."""
    pass


class ConfigInvalid(SlackerError, ValueError):
    """Required configuration (webhook url, recipients) missing or invalid."""
    pass


class StoreUnavailable(SlackerError, RuntimeError):
    """Record file could not be created, read, decoded or written."""
    pass


class DeliveryFailed(SlackerError, RuntimeError):
    """Webhook POST failed or Slack answered with something other than ok."""
    pass
