"""Error taxonomy for script parsing and storyboard persistence."""


class StoryboardError(Exception):
    """Base error; the message is shown to the user verbatim."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(StoryboardError):
    """Script text is missing, not a string, or empty."""


class NoScenesFoundError(StoryboardError):
    """Script text is well formed but holds no scene blocks."""


class PersistenceError(StoryboardError):
    """The parsed storyboard could not be written to the store."""


class StoryboardNotFoundError(StoryboardError):
    """No stored storyboard matches the requested reference."""
