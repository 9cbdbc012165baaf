"""Serializable views of bean inspection results.

Reports carry type names, never property values.
"""

from .models import (  # noqa: F401
    DescriptorListOut,
    InspectionReportOut,
    PropertyDescriptorOut,
    PropertyOut,
    build_descriptor_list,
    build_inspection_report,
)
