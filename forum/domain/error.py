"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str | int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAllowedError(DomainError):
    """Raised when the current user may not perform an action."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"you don't have permission to {action}")


class NeedLoginError(NotAllowedError):
    """Raised when an anonymous request hits an endpoint requiring login."""

    def __init__(self, action: str):
        self.action = action
        DomainError.__init__(self, f"you need to login before {action}")


class NotJoinPrivateGroupError(NotAllowedError):
    """Raised when posting into a private group the user has not joined."""

    def __init__(self, group_name: str):
        self.action = "post in private group"
        self.group_name = group_name
        DomainError.__init__(
            self,
            f"you need to join private group '{group_name}' before you create a post or reply",
        )


class UnimplementedError(DomainError):
    """Raised for recognised requests the service does not support yet."""

    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"{feature} is not implemented yet")


class DataIntegrityError(DomainError):
    """Raised when stored data breaks an invariant the service relies on.

    A valid token without a user, a topic without its body post, or a reply
    whose author no longer exists all point at storage corruption or a bug,
    never at something a client can trigger on purpose.
    """

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"unexpected missing {resource}")


class PermissionDecodeError(DomainError):
    """Raised when a serialized permission blob cannot be decoded."""

    pass
