from typing import Any, Callable, Tuple

from pydantic import BaseModel, ConfigDict, Field

from bindery.domain.enums import Lifetime


class Binding(BaseModel):
    """Value object mapping a service identifier to its construction rule.

    Attributes:
        service_id: The identifier being bound.
        implementation: Class or factory called with the resolved dependencies.
        dependencies: Ordered identifiers whose instances are passed positionally.
        lifetime: How long the constructed instance is reused.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    service_id: Any = Field(..., description="The identifier being bound.")
    implementation: Callable[..., Any] = Field(
        ..., description="Class or factory function producing the instance."
    )
    dependencies: Tuple[Any, ...] = Field(
        default=(),
        description="Ordered service identifiers injected into the implementation.",
    )
    lifetime: Lifetime = Field(default=Lifetime.TRANSIENT, description="The lifetime of the bound service.")
