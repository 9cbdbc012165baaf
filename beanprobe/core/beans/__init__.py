from .access import ProbeOutcome, get_property, parse_property_expression, probe_property
from .boxing import PRIMITIVE_BOXES, boxed_primitive_type, is_assignable_from, is_primitive
from .descriptors import PropertyDescriptor, describe_properties
from .exceptions import BeanError, IntrospectionError, PropertyAccessError
from .inspector import BeanPropertyInspector, Property, PropertyIterator

__all__ = [
    "BeanPropertyInspector",
    "Property",
    "PropertyIterator",
    "PropertyDescriptor",
    "describe_properties",
    "get_property",
    "parse_property_expression",
    "probe_property",
    "ProbeOutcome",
    "PRIMITIVE_BOXES",
    "boxed_primitive_type",
    "is_primitive",
    "is_assignable_from",
    "BeanError",
    "IntrospectionError",
    "PropertyAccessError",
]
