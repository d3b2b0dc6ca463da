from exam_portal.core.subjects import canonical_code, subject_name, viewer_subject_name


def test_lookup_ignores_case():
    assert subject_name("cs3004") == "Computer Networks"
    assert canonical_code(" ma2001 ") == "MA2001"


def test_unknown_code_passes_through_unchanged():
    assert subject_name("ph1001") == "ph1001"
    assert viewer_subject_name("ph1001") == "Unknown Subject"
