from services.section_parser import (
    count_header_lines,
    count_metrics,
    count_sections,
    extract_metadata,
    has_email,
    has_linkedin,
    word_count,
)


def test_extract_metadata(sample_resume):
    meta = extract_metadata(sample_resume)
    assert meta.has_email is True
    assert meta.has_phone is True
    assert meta.has_linkedin is True
    assert meta.has_github is True
    assert meta.has_sections.experience is True
    assert meta.has_sections.education is True
    assert meta.has_sections.skills is True
    assert meta.has_sections.summary is True
    assert meta.has_years is True
    assert meta.has_bullet_points is True
    assert meta.word_count == word_count(sample_resume)
    assert meta.estimated_sections == 4


def test_extract_metadata_empty():
    meta = extract_metadata("")
    assert meta.word_count == 0
    assert meta.has_email is False
    assert meta.has_phone is False
    assert meta.estimated_sections == 0


def test_phone_formats():
    assert extract_metadata("call 555-123-4567").has_phone is True
    assert extract_metadata("call 555.123.4567").has_phone is True
    assert extract_metadata("call 5551234567").has_phone is True
    assert extract_metadata("call 555-1234").has_phone is False


def test_count_sections():
    assert count_sections("Projects\nAwards") == 2
    assert count_sections("Certifications and Licenses") == 1
    assert count_sections("nothing to see") == 0


def test_count_header_lines():
    text = "Jane Doe\nSummary\nBuilt 3 services, shipped weekly.\nWork History\nSkills"
    # "Built 3 services, ..." contains digits and punctuation
    assert count_header_lines(text) == 4


def test_count_header_lines_windows_line_endings():
    assert count_header_lines("Jane Doe\r\nSummary\r\nWork History\r\nSkills") == 4
    assert count_header_lines("Summary\rSkills") == 2


def test_count_header_lines_ignores_long_lines():
    text = "a line that is far too long to be considered a section header\nok"
    assert count_header_lines(text) == 0


def test_count_metrics():
    assert count_metrics("30% and $5 and 100") == 3
    assert count_metrics("no numbers") == 0


def test_contact_helpers():
    assert has_email("reach me at jane@mail.io") is True
    assert has_email("reach me at jane at mail") is False
    assert has_linkedin("LinkedIn.com/in/jane") is True
