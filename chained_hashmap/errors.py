class InvalidKeyError(ValueError):
    """Raised when a key is missing, not a string, or empty."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Invalid key {key!r}: 'key' must be a non-empty string.")


def validate_key(key) -> None:
    if isinstance(key, str) and len(key) > 0:
        return
    raise InvalidKeyError(key)
