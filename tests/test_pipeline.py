import pytest

from commentflow.detect.classifier import RULES, register_rule
from commentflow.document import LineDocument, Position, Selection
from commentflow.pipeline import ReflowConfig, RunConfig, reflow_comment, run


class RecordingDocument(LineDocument):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.replacements = []

    def replace(self, start, end, text):
        self.replacements.append((start, end, text))
        super().replace(start, end, text)


def test_reflow_comment_replaces_block_range():
    doc = LineDocument.from_text("x = 1\n# a b\n# c\ny = 2\n", "python")
    edit = reflow_comment(doc, Selection.cursor(2), ReflowConfig(width=80))
    assert edit.text == "# a b c"
    assert edit.start == Position(1, 0)
    assert edit.end == Position(2, 3)
    assert edit.changed
    assert doc.text == "x = 1\n# a b c\ny = 2\n"


def test_cursor_on_code_leaves_document_alone():
    doc = RecordingDocument(lines=["x = 1", "# a"], language_id="python")
    assert reflow_comment(doc, Selection.cursor(0)) is None
    assert doc.replacements == []


def test_already_reflowed_block_is_not_replaced():
    doc = RecordingDocument(lines=["# a b c"], language_id="python")
    edit = reflow_comment(doc, Selection.cursor(0))
    assert edit is not None and not edit.changed
    assert doc.replacements == []


def test_unparseable_prefix_aborts():
    register_rule("sql", lambda trimmed: trimmed.startswith("--"))
    try:
        doc = RecordingDocument(lines=["-- one", "-- two"], language_id="sql")
        assert reflow_comment(doc, Selection.cursor(0)) is None
        assert doc.replacements == []
    finally:
        RULES.pop("sql")


def test_selection_reflows_the_block_once():
    doc = RecordingDocument(lines=["def f():", "    # one two", "    # three", "    pass"], language_id="python")
    selection = Selection(Position(0, 0), Position(2, 11))
    reflow_comment(doc, selection, ReflowConfig(width=40))
    assert len(doc.replacements) == 1
    assert doc.lines == ["def f():", "    # one two three", "    pass"]


def test_crlf_line_endings_survive():
    doc = LineDocument.from_text("# a\r\n# b\r\n", "r")
    reflow_comment(doc, Selection.cursor(0))
    assert doc.text == "# a b\r\n"


def test_run_rewrites_file_in_place(tmp_path):
    src = tmp_path / "stats.R"
    src.write_text("#' Compute the mean of the values given\nmean_of <- function(x) mean(x)\n")
    edit = run(RunConfig(file=src, line=1, in_place=True, width=24))
    assert edit.changed
    assert src.read_text() == "#' Compute the mean of\n#' the values given\nmean_of <- function(x) mean(x)\n"


def test_run_writes_output_path_and_detects_language(tmp_path):
    src = tmp_path / "app.ts"
    src.write_text("// alpha beta gamma\n# not a ts comment\n")
    out = tmp_path / "out" / "app.ts"
    run(RunConfig(file=src, line=1, output=out, width=14))
    assert out.read_text() == "// alpha beta\n// gamma\n# not a ts comment\n"
    assert src.read_text() == "// alpha beta gamma\n# not a ts comment\n"


def test_run_rejects_line_outside_file(tmp_path):
    src = tmp_path / "a.py"
    src.write_text("# one\n")
    with pytest.raises(SystemExit) as exc:
        run(RunConfig(file=src, line=5))
    assert exc.value.code == 2


def test_form_feed_outside_block_is_kept():
    doc = LineDocument.from_text("# a\n# b\n\x0c\nx = 1\n", "python")
    reflow_comment(doc, Selection.cursor(0))
    assert doc.text == "# a b\n\x0c\nx = 1\n"


def test_mixed_line_endings_are_kept_per_line():
    doc = LineDocument.from_text("# a\n# b\nx = 1\r\ny = 2\n", "python")
    reflow_comment(doc, Selection.cursor(0))
    assert doc.text == "# a b\nx = 1\r\ny = 2\n"


def test_wrapped_block_uses_its_first_line_ending():
    doc = LineDocument.from_text("x = 1\n# one two three\r\ny = 2", "python")
    reflow_comment(doc, Selection.cursor(1), ReflowConfig(width=10))
    assert doc.text == "x = 1\n# one two\r\n# three\r\ny = 2"


def test_line_separator_inside_line_is_not_a_break():
    doc = LineDocument.from_text("x = 1  # a\u2028b\ny = 2\n", "python")
    assert doc.lines == ["x = 1  # a\u2028b", "y = 2"]
    assert doc.text == "x = 1  # a\u2028b\ny = 2\n"
