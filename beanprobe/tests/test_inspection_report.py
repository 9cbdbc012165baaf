import ctypes

from beanprobe.api.models import InspectionReportOut, build_descriptor_list, build_inspection_report
from beanprobe.core.beans import BeanPropertyInspector

from bean_samples import Account, Point


def test_report_lists_properties_with_type_names():
    report = build_inspection_report(BeanPropertyInspector(Point(1, 2), ctypes.Structure, True))

    assert isinstance(report, InspectionReportOut)
    assert report.target_type == "bean_samples.Point"
    assert report.report_boxed_primitives is True
    assert report.count == 2
    assert [(p.name, p.type) for p in report.properties] == [
        ("x", "builtins.int"),
        ("y", "builtins.int"),
    ]
    assert report.assignable_from is None


def test_report_can_filter_by_assignability():
    report = build_inspection_report(BeanPropertyInspector(Account(), object), assignable_from=int)

    assert [p.name for p in report.properties] == ["base_id", "balance"]
    assert report.count == 2
    assert report.assignable_from == "builtins.int"


def test_report_round_trips_through_json():
    report = build_inspection_report(BeanPropertyInspector(Account(), object))

    again = InspectionReportOut.model_validate_json(report.model_dump_json())
    assert again == report


def test_descriptor_list_keeps_declaring_class_and_kind():
    listing = build_descriptor_list(Account, object)

    assert listing.class_name == "bean_samples.Account"
    assert listing.stop_type == "builtins.object"
    rows = listing.properties
    assert rows[0].name == "base_id"
    assert rows[0].declaring_class == "bean_samples.Base"
    assert {r.kind for r in rows} == {"property"}
