class DataLoadError(RuntimeError):
    """Raised when the EV statistics CSV cannot be read into records."""
