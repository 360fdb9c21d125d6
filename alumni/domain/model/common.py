"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; state changes produce a new instance via ``evolve``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied and re-validated.

        Unlike ``model_copy(update=...)``, field constraints are enforced on
        the new values.
        """
        return type(self).model_validate({**dict(self), **changes})
