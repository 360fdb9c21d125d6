"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when a caller is not signed in or presents bad credentials."""

    pass


class AuthorizationError(DomainError):
    """Raised when the acting account lacks the role for an operation."""

    pass


class ProtectedAccountError(AuthorizationError):
    """Raised when an operation targets a super admin or the actor itself."""

    def __init__(self, account_id: str, reason: str):
        self.account_id = account_id
        super().__init__(f"Account {account_id} is protected: {reason}")


class InvalidTransitionError(BusinessRuleViolationError):
    """Raised when a transition is not allowed from the account's state."""

    def __init__(self, transition: str, state: str):
        self.transition = transition
        self.state = state
        super().__init__(f"Cannot {transition} an account in state {state}")


class ConflictError(DomainError):
    """Raised when a conditional update loses a race with another writer."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} {identifier} was modified concurrently, retry with fresh state"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
