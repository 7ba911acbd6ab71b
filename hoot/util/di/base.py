"""Provider base for the client container."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a mock provider
Component = Literal["api", "identity"]


class ProviderBase(Provider):
    """Provider with mock-selection metadata.

    Mockable components declare ``__mock_component__`` on a base class and
    ship one production and one mock subclass, told apart by
    ``__is_mock__``. Concrete providers such as config and the stores
    leave both at their defaults.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
