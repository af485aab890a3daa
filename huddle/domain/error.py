"""Domain layer errors."""

from uuid import UUID


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input or a disallowed update field."""

    pass


class ConflictError(DomainError):
    """Uniqueness violation (duplicate name, duplicate membership)."""

    pass


class AlreadyMemberError(ConflictError):
    """Raised when a user joins a group they already belong to."""

    def __init__(self, user_id: UUID, resource: str, resource_id: UUID):
        self.user_id = user_id
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"User {user_id} is already in {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthorizationError(DomainError):
    """Base for role and ownership mismatches.

    Every subclass carries the acting user and the resource it was checked
    against, so callers can tell which guard failed.
    """

    role = "authorized"

    def __init__(self, user_id: UUID, resource: str, resource_id: UUID | str):
        self.user_id = user_id
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not the {self.role} of {resource} {resource_id}"
        )


class CreatorMismatchError(AuthorizationError):
    """Acting user is not the creator of the activity."""

    role = "creator"

    def __init__(self, user_id: UUID, activity_id: UUID):
        super().__init__(user_id, "activity", activity_id)


class ManagerMismatchError(AuthorizationError):
    """Acting user is not a manager of the activity."""

    role = "manager"

    def __init__(self, user_id: UUID, activity_id: UUID):
        super().__init__(user_id, "activity", activity_id)


class MemberMismatchError(AuthorizationError):
    """Acting user is not a member of the activity."""

    role = "member"

    def __init__(self, user_id: UUID, activity_id: UUID):
        super().__init__(user_id, "activity", activity_id)


class CarpoolDriverMismatchError(AuthorizationError):
    """Acting user is not the driver of the carpool."""

    role = "driver"

    def __init__(self, user_id: UUID, carpool_id: UUID):
        super().__init__(user_id, "carpool", carpool_id)


class CarpoolMemberMismatchError(AuthorizationError):
    """Acting user is not a member of the carpool."""

    role = "member"

    def __init__(self, user_id: UUID, carpool_id: UUID):
        super().__init__(user_id, "carpool", carpool_id)


class AuthorMismatchError(AuthorizationError):
    """Acting user is not the author of the comment."""

    role = "author"

    def __init__(self, user_id: UUID, comment_id: UUID):
        super().__init__(user_id, "comment", comment_id)


class PostAuthorMismatchError(AuthorizationError):
    """Acting user is not the author of the post."""

    role = "author"

    def __init__(self, user_id: UUID, post_id: UUID):
        super().__init__(user_id, "post", post_id)


class InvalidJoinCodeError(AuthorizationError):
    """Join code rejected.

    Raised for a wrong code and for an unknown activity alike. The message
    never names the activity; the identifier is kept on `resource_id`.
    """

    def __init__(self, activity: UUID | str):
        self.user_id = None
        self.resource = "activity"
        self.resource_id = activity
        DomainError.__init__(self, "The join code is incorrect")


class CreatorProtectedError(AuthorizationError):
    """The creator cannot be demoted, removed or leave their own activity."""

    def __init__(self, user_id: UUID, activity_id: UUID):
        self.user_id = user_id
        self.resource = "activity"
        self.resource_id = activity_id
        DomainError.__init__(
            self, f"The creator of activity {activity_id} cannot be removed"
        )


class DriverProtectedError(AuthorizationError):
    """The driver cannot leave their own carpool; they delete it instead."""

    def __init__(self, user_id: UUID, carpool_id: UUID):
        self.user_id = user_id
        self.resource = "carpool"
        self.resource_id = carpool_id
        DomainError.__init__(
            self, f"The driver of carpool {carpool_id} cannot leave it"
        )
