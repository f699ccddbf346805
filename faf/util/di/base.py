"""Provider base class and component selection."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["mail", "persistence", "steam"]


class ProviderBase(Provider):
    """Base of every provider of the account service.

    A provider that declares ``__mock_component__`` is the base of a
    swappable component with one production and one mock subclass, told
    apart by ``__is_mock__``. Providers without subclasses are used as is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def select_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Pick the implementation of a provider base.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for subclass in subclasses:
        if subclass.__is_mock__ == use_mock:
            return subclass

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
