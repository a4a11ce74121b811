class SalesDataError(Exception):
    """Base class for errors raised while reading or parsing sales data."""


class LoadError(SalesDataError):
    """The sales data source could not be read."""


class ParseError(SalesDataError):
    """The sales data source was read but its content is malformed."""
