"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the rules that span more than one repository, such as
    checking a post before writing a comment under it.
    """

    pass
