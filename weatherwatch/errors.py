# ABOUTME: Error types raised by the weather core
# ABOUTME: InvalidArgumentError covers bad scale names, source names and thresholds


class InvalidArgumentError(ValueError):
    """Raised when user-supplied input names an unknown scale or source, or isn't a number"""
