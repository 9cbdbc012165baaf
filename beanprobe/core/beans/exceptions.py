class BeanError(Exception):
    """
    Base exception for all bean introspection failures.
    """

    pass


class IntrospectionError(BeanError):
    """
    Raised when a type's property metadata cannot be retrieved at all.
    """

    pass


class PropertyAccessError(BeanError):
    """
    Raised when a single property value cannot be read from a bean.
    """

    def __init__(self, property_name: str, reason: str) -> None:
        super().__init__(f"couldn't get property [{property_name}]: {reason}")
        self.property_name = property_name
        self.reason = reason
