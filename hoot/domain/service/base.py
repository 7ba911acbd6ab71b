"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that doesn't naturally belong to a single
    entity, such as the signed-in identity shared by every component.
    """

    pass
