"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the boundary layer can catch them uniformly and map each kind to its own
response. Faults in collaborators (organization registry, storage) derive
from InfrastructureError instead and are never mistaken for business errors.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated, or an argument is invalid."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with ID '{product_id}' not found")
        self.product_id = product_id


class RequestNotFoundError(EntityNotFoundError):

    def __init__(self, request_id: int) -> None:
        super().__init__(f"Product creation request with ID '{request_id}' not found")
        self.request_id = request_id


class OrganizationError(DomainException):
    """The organization behind an operation is not in a usable state."""

    reason = "is unavailable"

    def __init__(self, organization_id: int) -> None:
        super().__init__(f"Organization with ID '{organization_id}' {self.reason}")
        self.organization_id = organization_id


class OrganizationNotFoundError(OrganizationError):
    reason = "was not found"


class OrganizationFrozenError(OrganizationError):
    reason = "is frozen"


class OrganizationDeletedError(OrganizationError):
    reason = "is deleted"


class InvalidOwnerError(DomainException):
    """The caller is not the registered owner of the organization."""

    def __init__(self, organization_id: int, owner_id: int | None, caller_id: int) -> None:
        super().__init__(
            f"User #{caller_id} is not the owner of organization '{organization_id}'"
        )
        self.organization_id = organization_id
        self.owner_id = owner_id
        self.caller_id = caller_id


class ProductNameConflictError(DomainException):

    def __init__(self, name: str) -> None:
        super().__init__(f"Product '{name}' already exists")
        self.name = name


class InsufficientStockError(DomainException):

    def __init__(self, available: int, requested: int) -> None:
        super().__init__(
            f"Insufficient stock (need {requested}, have {available} available)"
        )
        self.available = available
        self.requested = requested


class InfrastructureError(Exception):
    """A collaborator failed; not a business rule violation."""


class OrganizationRegistryError(InfrastructureError):
    """The organization registry could not be consulted."""
