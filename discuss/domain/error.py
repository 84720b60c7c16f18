"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PostNotFoundError(NotFoundError):
    """Raised when a post does not exist or has been deleted."""

    def __init__(self, identifier: str):
        super().__init__("Post", identifier)


class ParentNotFoundError(NotFoundError):
    """Raised when a reply targets a comment that is not on the post."""

    def __init__(self, identifier: str):
        super().__init__("Parent comment", identifier)


class DanglingReferenceError(DomainError):
    """Raised by repositories when an insert violates a foreign key.

    Attributes:
        reference: Name of the dangling reference ("post_id" or "parent_id")
        identifier: The referenced ID that does not exist
    """

    def __init__(self, reference: str, identifier: str):
        self.reference = reference
        self.identifier = identifier
        super().__init__(f"Dangling {reference} reference: {identifier}")
