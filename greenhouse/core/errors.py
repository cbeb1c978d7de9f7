class GreenhouseError(Exception):
    """Base class for controller errors."""


class ConfigurationError(GreenhouseError, ValueError):
    """Limits or ranges that cannot produce meaningful alarms."""


class AlarmStorageError(GreenhouseError):
    """A new active alarm could not be stored; the tracker is unchanged."""
