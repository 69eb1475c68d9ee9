from __future__ import annotations

"""
Unit tests for the heuristic File Classifier.

Verifies the error boundaries (empty, stub-only, placeholder-only files),
the warning triggers (urgency tags, pasted compiler/runtime errors) and the
lenient defaults for everything else.
"""

from routehealth.core.pipeline.components.classifier import (
    classify,
    classify_file,
    count_code_lines,
    has_legitimate_code,
)
from routehealth.domain.constants import STATUS_ERROR, STATUS_WARNING, STATUS_WORKING

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

def test_empty_file_is_error():
    result = classify("src/a.ts", "  \n\t\n")
    assert result.status == STATUS_ERROR
    assert result.warnings == ("file is empty",)


def test_not_implemented_throw_alone_is_error():
    result = classify("src/foo.ts", 'throw new Error("Not implemented");\n')
    assert result.status == STATUS_ERROR
    assert result.warnings == ("file only contains an explicit not-implemented stub",)


def test_python_stub_alone_is_error():
    assert classify("brain/model.py", "raise NotImplementedError\n").status == STATUS_ERROR


def test_placeholder_only_file_is_error():
    result = classify("src/empty.ts", "// implement everything here\n")
    assert result.status == STATUS_ERROR
    assert result.warnings == ("placeholder file with no implementation",)

# -----------------------------------------------------------------------------
# LEGITIMATE CODE WINS
# -----------------------------------------------------------------------------

def test_stub_next_to_real_code_is_working():
    content = 'export function foo() {}\nthrow new Error("Not implemented");\n'
    result = classify("src/foo.ts", content)
    assert result.status == STATUS_WORKING
    assert result.warnings == ()


def test_python_abstract_method_is_working():
    content = "def run(self):\n    raise NotImplementedError\n"
    assert classify("brain/base.py", content).status == STATUS_WORKING


def test_debug_prints_and_generic_todos_are_not_flagged():
    content = "export function a() {\n  console.log('x'); // TODO tidy up\n  let y: any = 1;\n}\n"
    assert classify("src/a.ts", content).status == STATUS_WORKING

# -----------------------------------------------------------------------------
# WARNINGS
# -----------------------------------------------------------------------------

def test_urgency_tag_is_warning():
    result = classify("src/tuner.ts", "export const x = 1;\n// URGENT: fix pitch drift\n")
    assert result.status == STATUS_WARNING
    assert result.warnings == ("contains URGENT marker",)


def test_lowercase_urgency_words_are_ignored():
    assert classify("src/a.ts", "export const note = 'critical: none';\n").status == STATUS_WORKING


def test_pasted_compiler_error_is_warning():
    content = "export const a = 1;\nsrc/a.ts(3,5): error TS2304: Cannot find name 'x'.\n"
    result = classify("src/a.ts", content)
    assert result.status == STATUS_WARNING
    assert result.warnings == ("content looks like an unhandled compiler or runtime error",)


def test_marker_and_traceback_accumulate_in_order():
    content = "import os\n# BROKEN! see below\nTraceback (most recent call last):\n"
    result = classify("scripts/run.py", content)
    assert result.status == STATUS_WARNING
    assert result.warnings == (
        "contains BROKEN marker",
        "content looks like an unhandled compiler or runtime error",
    )

# -----------------------------------------------------------------------------
# SCOPE AND I/O
# -----------------------------------------------------------------------------

def test_stub_rules_only_apply_to_source_code():
    assert classify("brain/notes.md", "raise NotImplementedError\n").status == STATUS_WORKING


def test_classify_file_reports_unreadable_content(tmp_path):
    f = tmp_path / "binary.ts"
    f.write_bytes(b"\xff\xfe\x00\x80")

    result = classify_file(str(f), "binary.ts")

    assert result.status == STATUS_ERROR
    assert len(result.warnings) == 1
    assert result.warnings[0].startswith("could not read")


def test_classify_file_reads_and_classifies(tmp_path):
    f = tmp_path / "ok.ts"
    f.write_text("export default {};\n", encoding="utf-8")

    assert classify_file(str(f), "ok.ts").status == STATUS_WORKING


def test_helpers():
    assert has_legitimate_code("const a = 1") is True
    assert has_legitimate_code("hello world") is False
    assert count_code_lines("// c\n\n# c\nx\ny\n") == 2
