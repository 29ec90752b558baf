"""Exceptions raised by the star quiz core."""


class StarQuizError(Exception):
    """Base class for star quiz errors."""


class CatalogLoadError(StarQuizError):
    """The star catalog could not be read or parsed."""


class NoSelectionError(StarQuizError):
    """A quiz answer was submitted with nothing selected."""


class QuizActiveError(StarQuizError):
    """A question was started while another one is still open."""
