# Author: Bradley R. Kinnard — timestamps are the enemy of reproducibility

"""
The actual transform. xjc stamps every ObjectFactory.java with a header like

    //
    // This file was generated by the JavaTM Architecture for XML Binding(JAXB) ...
    // See <a href="https://javaee.github.io/jaxb-v2/">...</a>
    // Any modifications to this file will be lost upon recompilation of the source schema.
    // Generated on: 2021.04.01 at 12:34:56 PM CEST
    //

and we cut exactly that block out. Detection is structural (markers + signature),
not line numbers, so new xjc versions and locales don't break it.

Bytes outside the block are copied, not re-encoded, so CRLF, BOMs and a missing
trailing newline all survive.
"""

import codecs
import io
import logging
from pathlib import Path

from src.jaxbstrip.core.errors import TransformFailed
from src.jaxbstrip.core.models import StripMarkerState, StripRegion

log = logging.getLogger(__name__)

MARKER = "//"
SIGNATURE = "generated by"
BOM = "\ufeff"


def is_marker(line: str) -> bool:
    """just `//`, whitespace around it is fine"""
    return line.strip() == MARKER


def is_signature(line: str) -> bool:
    return SIGNATURE in line


def is_comment(line: str) -> bool:
    return line.lstrip().startswith(MARKER)


def find_region(lines: list[str]) -> StripRegion | None:
    """
    First `//` ... `// ...generated by...` ... `//` comment block, or None.
    The signature only counts on a `//` line; code mentioning "generated by" is code.
    Anything that isn't a `//` line inside a candidate block (code, blank line)
    abandons the candidate. EOF inside a candidate = no match.
    """
    state = StripMarkerState()

    for i, line in enumerate(lines):
        if not state.in_comment_block:
            if is_marker(line):
                state = StripMarkerState(in_comment_block=True, begin=i)
            continue

        if is_comment(line) and is_signature(line):
            state.seen_generator_signature = True
        elif is_marker(line) and state.seen_generator_signature:
            return StripRegion(begin=state.begin, end=i)
        elif not is_comment(line):
            # every marker since state.begin would die on this same line, no need to rescan
            state = StripMarkerState()

    return None


def split_lines(text: str) -> list[str]:
    """lines with their terminators attached. \\n, \\r\\n and \\r, same as a java BufferedReader"""
    return list(io.StringIO(text, newline=""))


def strip_bytes(raw: bytes, encoding: str, path: Path | str = "<memory>") -> tuple[bytes, bool]:
    """
    Normalize one file's bytes. Returns (output, changed).
    Raises TransformFailed if the bytes don't decode, or don't encode back to themselves.
    """
    if not raw:
        return raw, False

    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise TransformFailed(path, e) from e

    lines = split_lines(text)
    region = find_region([line.lstrip(BOM) if i == 0 else line for i, line in enumerate(lines)])

    # encode piecewise so every line knows its own bytes. the preamble is whatever the
    # codec emits before any text (utf-16/utf-8-sig BOM) plus a literal U+FEFF if present
    encoder = codecs.getincrementalencoder(encoding)()
    try:
        preamble = encoder.encode("")
        if not raw.startswith(preamble):
            # utf-8-sig / utf-16 file written without a BOM, don't invent one
            preamble = b""
        if lines and lines[0].startswith(BOM):
            preamble += encoder.encode(BOM)
            lines[0] = lines[0][len(BOM):]
        chunks = [encoder.encode(line) for line in lines]
        tail = encoder.encode("", final=True)
    except UnicodeEncodeError as e:
        raise TransformFailed(path, e) from e

    if preamble + b"".join(chunks) + tail != raw:
        # can't promise byte fidelity, so don't touch it
        raise TransformFailed(path, f"{encoding} does not round-trip this file losslessly")

    if region is None:
        return raw, False

    kept = chunks[:region.begin] + chunks[region.end + 1:]
    log.debug(f"{path}: dropping lines {region.begin + 1}-{region.end + 1}")
    return preamble + b"".join(kept) + tail, True


def strip(input_path: Path, output_path: Path, encoding: str) -> bool:
    """
    Read input_path, write the normalized copy to output_path (truncated first).
    Returns True if the generator header was found and removed.
    """
    try:
        raw = input_path.read_bytes()
    except OSError as e:
        raise TransformFailed(input_path, e) from e

    out, changed = strip_bytes(raw, encoding, input_path)

    try:
        with open(output_path, "wb") as f:
            f.write(out)
    except OSError as e:
        raise TransformFailed(input_path, e) from e
    return changed
