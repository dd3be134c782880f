# seo_checker/errors.py


class FetchError(Exception):
    """Raised when the markup of a URL could not be retrieved."""

    default_message = "Failed to fetch URL"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
