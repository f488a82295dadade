"""Tests for tinyspec.reports.reporter."""

from tinyspec import Reporter, capture_output


class TestFormatting:
    def test_format_header(self):
        assert Reporter.format_header("Testing") == "Test Case: Testing\n"

    def test_format_case_with_error(self):
        expected = "  [ERR!] Testing description \n\t -- Message"
        assert Reporter.format_case("Testing", "description", True, ValueError("Message")) == expected

    def test_format_case_tags(self):
        assert Reporter.format_case("T", "d", True) == "  [ OK ] T d "
        assert Reporter.format_case("T", "d", False) == "  [FAIL] T d "
        assert Reporter.format_case("T", "d", None) == "  [SKIP] T d "

    def test_format_case_error_without_message_uses_type_name(self):
        assert Reporter.format_case("T", "d", False, KeyError()).endswith("\n\t -- KeyError")

    def test_format_footer(self):
        expected = "\n  4 tests, 1 passed, 1 skipped, 1 failed, 1 errors\n "
        assert Reporter.format_footer([True, None, False, RuntimeError()]) == expected

    def test_format_footer_empty(self):
        assert Reporter.format_footer([]) == "\n  0 tests, 0 passed, 0 skipped, 0 failed, 0 errors\n "

    def test_format_desc(self):
        assert Reporter.format_desc("test_is_descriptive") == "is descriptive"
        assert Reporter.format_desc("plain") == "plain"


class TestReport:
    def test_report_writes_and_returns_text(self, stream, reporter):
        assert reporter.report("header", "Testing") == "Test Case: Testing\n"
        assert stream.getvalue() == "Test Case: Testing\n"

    def test_report_appends_newline_when_missing(self, stream, reporter):
        reporter.report("case", "Testing", "description", True)
        assert stream.getvalue() == "  [ OK ] Testing description \n"

    def test_unknown_kind_is_a_no_op(self, stream, reporter):
        assert reporter.report("nonsense", "Testing") is None
        assert stream.getvalue() == ""

    def test_default_stream_is_current_stdout(self):
        instance = Reporter()
        with capture_output() as buf:
            instance.report("header", "Testing")
        assert buf.text == "Test Case: Testing\n"

    def test_stream_can_be_replaced(self, stream):
        instance = Reporter()
        instance.stream = stream
        instance.report("header", "Testing")
        assert stream.getvalue() == "Test Case: Testing\n"
