from __future__ import annotations

from pydantic import BaseModel, Field
from typing import List, Optional

from beanprobe.core.beans import BeanPropertyInspector, describe_properties
from beanprobe.utils.type_names import qualified_type_name


class PropertyOut(BaseModel):
    """One inspected property."""

    name: str
    type: str


class PropertyDescriptorOut(BaseModel):
    """A declared property, before any probing."""

    name: str
    type: str
    declaring_class: str
    kind: str


class InspectionReportOut(BaseModel):
    """Inspection result. Never carries property values."""

    target_type: str
    stop_type: str
    report_boxed_primitives: bool = False
    count: int = 0
    properties: List[PropertyOut] = Field(default_factory=list)
    assignable_from: Optional[str] = None


class DescriptorListOut(BaseModel):
    """Declared properties of a class up to a stop type."""

    class_name: str
    stop_type: str
    properties: List[PropertyDescriptorOut] = Field(default_factory=list)


def build_inspection_report(
    inspector: BeanPropertyInspector,
    *,
    assignable_from: Optional[type] = None,
) -> InspectionReportOut:
    """Build a report from an inspector.

    If ``assignable_from`` is given, only properties assignable from that
    type are listed.
    """

    wanted = None
    if assignable_from is not None:
        wanted = set(inspector.names_assignable_from(assignable_from))

    props = [
        PropertyOut(name=p.name, type=qualified_type_name(p.property_type))
        for p in inspector
        if wanted is None or p.name in wanted
    ]
    return InspectionReportOut(
        target_type=qualified_type_name(type(inspector.target)),
        stop_type=qualified_type_name(inspector.stop_type),
        report_boxed_primitives=inspector.report_boxed_primitives,
        count=len(props),
        properties=props,
        assignable_from=qualified_type_name(assignable_from) if assignable_from is not None else None,
    )


def build_descriptor_list(cls: type, stop_type: type) -> DescriptorListOut:
    """Describe ``cls`` up to ``stop_type`` without reading any property.

    Raises IntrospectionError like describe_properties().
    """

    return DescriptorListOut(
        class_name=qualified_type_name(cls),
        stop_type=qualified_type_name(stop_type),
        properties=[
            PropertyDescriptorOut(
                name=d.name,
                type=qualified_type_name(d.property_type),
                declaring_class=qualified_type_name(d.declaring_class),
                kind=d.kind,
            )
            for d in describe_properties(cls, stop_type)
        ],
    )
