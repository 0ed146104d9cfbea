class SearchError(Exception):
    """Base class for search failures."""


class NoSolutionError(SearchError, RuntimeError):
    """The frontier ran empty without reaching a goal configuration."""


class MissingRecordError(SearchError, KeyError):
    """A state was looked up that this search never discovered."""
