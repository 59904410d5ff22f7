# Author: Bradley R. Kinnard — prove the header dies and nothing else does

"""
Unit tests for the line-filter transform.
Run with: pytest tests/unit/test_stripper.py -v
"""

import pytest

from src.jaxbstrip.core.errors import TransformFailed
from src.jaxbstrip.core.models import StripRegion
from src.jaxbstrip.core.stripper import find_region, split_lines, strip, strip_bytes

HEADER = (
    "//\n"
    "// This file was generated by the JavaTM Architecture for XML Binding(JAXB) Reference Implementation, v2.3.0 \n"
    "// See <a href=\"https://javaee.github.io/jaxb-v2/\">https://javaee.github.io/jaxb-v2/</a> \n"
    "// Any modifications to this file will be lost upon recompilation of the source schema. \n"
    "// Generated on: 2021.04.01 at 12:34:56 PM CEST \n"
    "//\n"
)
BODY = "package com.example;\n\npublic class ObjectFactory { }\n"


def test_typical_xjc_output():
    """S1: the header goes, the rest stays"""
    raw = (HEADER + BODY).encode("utf-8")
    out, changed = strip_bytes(raw, "utf-8")
    assert changed
    assert out == BODY.encode("utf-8")


def test_no_signature_is_identity():
    """S2: ordinary // comments without 'generated by' are left alone"""
    src = "//\n// hand written, no tool involved\n//\npackage x;\n// trailing note\n"
    raw = src.encode("utf-8")
    out, changed = strip_bytes(raw, "utf-8")
    assert not changed
    assert out == raw


def test_only_first_region_stripped():
    """S3: two back to back blocks, second one survives verbatim"""
    second = "//\n// generated by something else\n//\n"
    raw = ("//\n// generated by xjc\n//\n" + second + "class X {}\n").encode("utf-8")
    out, changed = strip_bytes(raw, "utf-8")
    assert changed
    assert out == (second + "class X {}\n").encode("utf-8")


def test_unterminated_region_at_eof():
    """S4: marker + signature + EOF is not a match"""
    raw = b"//\n// generated by xjc\n"
    out, changed = strip_bytes(raw, "utf-8")
    assert not changed
    assert out == raw


def test_unterminated_region_before_code():
    raw = b"//\n// generated by xjc\npackage a;\n//\n"
    out, changed = strip_bytes(raw, "utf-8")
    assert not changed
    assert out == raw


def test_marker_without_signature_is_kept_and_scan_continues():
    lines = split_lines("//\nint x;\n//\n// generated by xjc\n//\nclass A {}\n")
    assert find_region(lines) == StripRegion(begin=2, end=4)


def test_blank_line_breaks_candidate_block():
    src = "//\n// notes\n\n//\n// generated by xjc\n//\nclass A {}\n"
    out, changed = strip_bytes(src.encode("utf-8"), "utf-8")
    assert changed
    assert out == b"//\n// notes\n\nclass A {}\n"


def test_marker_with_surrounding_whitespace():
    src = "  //  \n\t// This file was generated by xjc\n//\t\nclass A {}\n"
    out, changed = strip_bytes(src.encode("utf-8"), "utf-8")
    assert changed
    assert out == b"class A {}\n"


def test_signature_is_case_sensitive():
    raw = b"//\n// Generated By xjc\n//\nclass A {}\n"
    out, changed = strip_bytes(raw, "utf-8")
    assert not changed
    assert out == raw


def test_comment_text_is_not_a_marker():
    # "// foo" opens nothing, so the signature below it has no opening marker
    raw = b"// foo\n// generated by xjc\n//\nclass A {}\n"
    out, changed = strip_bytes(raw, "utf-8")
    assert not changed
    assert out == raw


def test_crlf_preserved():
    src = (HEADER + BODY).replace("\n", "\r\n")
    out, changed = strip_bytes(src.encode("utf-8"), "utf-8")
    assert changed
    assert out == BODY.replace("\n", "\r\n").encode("utf-8")


def test_bare_cr_preserved():
    src = (HEADER + BODY).replace("\n", "\r")
    out, _ = strip_bytes(src.encode("utf-8"), "utf-8")
    assert out == BODY.replace("\n", "\r").encode("utf-8")


def test_mixed_terminators_outside_region_untouched():
    raw = b"//\n// generated by xjc\r\n//\r\nline one\r\nline two\nlast"
    out, changed = strip_bytes(raw, "utf-8")
    assert changed
    assert out == b"line one\r\nline two\nlast"


def test_missing_trailing_newline_preserved():
    raw = (HEADER + "class A {}").encode("utf-8")
    out, _ = strip_bytes(raw, "utf-8")
    assert out == b"class A {}"


def test_utf8_bom_kept_when_region_is_first():
    raw = b"\xef\xbb\xbf" + (HEADER + BODY).encode("utf-8")
    out, changed = strip_bytes(raw, "utf-8")
    assert changed
    assert out == b"\xef\xbb\xbf" + BODY.encode("utf-8")


def test_utf8_sig_codec_keeps_its_bom():
    raw = (HEADER + BODY).encode("utf-8-sig")
    out, changed = strip_bytes(raw, "utf-8-sig")
    assert changed
    assert out == BODY.encode("utf-8-sig")


def test_utf8_sig_codec_without_bom_does_not_grow_one():
    raw = (HEADER + BODY).encode("utf-8")
    out, changed = strip_bytes(raw, "utf-8-sig")
    assert changed
    assert out == BODY.encode("utf-8")


def test_utf16_with_bom():
    raw = (HEADER + BODY).encode("utf-16")
    out, changed = strip_bytes(raw, "utf-16")
    assert changed
    assert out == BODY.encode("utf-16")


def test_latin1_bytes_outside_region_untouched():
    src = "//\n// generated by xjc, März\n//\n// Grüße\nclass Ä {}\n"
    out, changed = strip_bytes(src.encode("latin-1"), "latin-1")
    assert changed
    assert out == "// Grüße\nclass Ä {}\n".encode("latin-1")
    # decoding the output gives the input text minus the block
    assert out.decode("latin-1") == "// Grüße\nclass Ä {}\n"


def test_undecodable_input_fails():
    with pytest.raises(TransformFailed) as exc:
        strip_bytes(b"//\n\xff\xfe\xfa\n", "utf-8", "ObjectFactory.java")
    assert exc.value.path.name == "ObjectFactory.java"
    assert isinstance(exc.value.cause, UnicodeDecodeError)


def test_empty_input():
    assert strip_bytes(b"", "utf-16") == (b"", False)


@pytest.mark.parametrize("src", [
    HEADER + BODY,
    "//\n// no signature\n//\n" + BODY,
    "//\n// generated by xjc\n",
    (HEADER + BODY).replace("\n", "\r\n"),
])
def test_idempotent(src):
    """strip(strip(x)) == strip(x) for anything with at most one generator block"""
    once, _ = strip_bytes(src.encode("utf-8"), "utf-8")
    twice, changed = strip_bytes(once, "utf-8")
    assert twice == once
    assert not changed


@pytest.mark.parametrize("prefix,suffix", [
    ("", BODY),
    ("/* license */\r\n\r\n", "class A {}"),
    ("// a\n// b\nint x;\n", "\n\n\n"),
])
def test_only_region_bytes_change(prefix, suffix):
    raw = (prefix + HEADER + suffix).encode("utf-8")
    out, _ = strip_bytes(raw, "utf-8")
    assert out == (prefix + suffix).encode("utf-8")


def test_strip_writes_output_and_truncates(tmp_path):
    src = tmp_path / "ObjectFactory.java"
    dst = tmp_path / "out.tmp"
    src.write_bytes((HEADER + BODY).encode("utf-8"))
    dst.write_bytes(b"x" * 10_000)  # leftovers from a previous file

    assert strip(src, dst, "utf-8") is True
    assert dst.read_bytes() == BODY.encode("utf-8")
    # input untouched
    assert src.read_bytes() == (HEADER + BODY).encode("utf-8")


def test_strip_missing_input(tmp_path):
    with pytest.raises(TransformFailed):
        strip(tmp_path / "nope.java", tmp_path / "out.tmp", "utf-8")


def test_strip_unwritable_output(tmp_path):
    src = tmp_path / "ObjectFactory.java"
    src.write_bytes(BODY.encode("utf-8"))
    with pytest.raises(TransformFailed):
        strip(src, tmp_path / "no" / "such" / "dir.tmp", "utf-8")


def test_code_line_mentioning_signature_is_not_a_header():
    """'generated by' in java source doesn't make the block around it a header"""
    raw = b'//\nString s = "generated by hand";\n//\nclass A {}\n'
    out, changed = strip_bytes(raw, "utf-8")
    assert not changed
    assert out == raw


def test_code_signature_line_abandons_block_before_real_header():
    src = '//\nString s = "generated by hand";\n//\n// generated by xjc\n//\nclass A {}\n'
    assert find_region(split_lines(src)) == StripRegion(begin=2, end=4)
