"""Convert Hacker News HTML fragments into wrapped terminal text."""

import html
import re
from dataclasses import dataclass

from ycnews.ansi import BOLD_CYAN, GREEN, MAGENTA, RESET, visible_len

_RE_PRE = re.compile(r"<pre>\s*<code>(.*?)</code>\s*</pre>", re.DOTALL | re.IGNORECASE)
_RE_HREF = re.compile(r"<a\s[^>]*?href=\"([^\"]*)\"[^>]*>.*?</a>", re.DOTALL | re.IGNORECASE)
_RE_PARAGRAPH = re.compile(r"</?p\s*/?>", re.IGNORECASE)
_RE_TAG = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class Block:
    """One paragraph of converted text."""

    text: str
    preformatted: bool = False


def _inline(fragment: str) -> str:
    """Rewrite inline markup, drop unknown tags and unescape entities."""
    s = _RE_HREF.sub(lambda m: f"[{MAGENTA}{html.unescape(m.group(1))}{RESET}]", fragment)
    s = re.sub(r"<i>", BOLD_CYAN, s, flags=re.IGNORECASE)
    s = re.sub(r"</i>", RESET, s, flags=re.IGNORECASE)
    s = _RE_TAG.sub("", s)
    return html.unescape(s)


def fragment_to_blocks(fragment: str) -> list[Block]:
    """Split an HTML fragment into paragraphs and code blocks."""
    blocks: list[Block] = []
    # re.split with one group alternates: text, code, text, code, ...
    for i, part in enumerate(_RE_PRE.split(fragment)):
        if i % 2:
            code = html.unescape(_RE_TAG.sub("", part)).strip("\n")
            if code.strip():
                blocks.append(Block(code, preformatted=True))
            continue
        for para in _RE_PARAGRAPH.split(part):
            text = _inline(para).strip()
            if text:
                blocks.append(Block(text))
    return blocks


def wrap_visible(text: str, width: int) -> list[str]:
    """Wrap text at whitespace so no line shows more than width columns.

    Color sequences take no columns. Words longer than width stay whole.
    """
    lines: list[str] = []
    line = ""
    for word in text.split():
        if line and visible_len(line) + 1 + visible_len(word) > width:
            lines.append(line)
            line = word
        else:
            line = f"{line} {word}" if line else word
    if line:
        lines.append(line)
    return lines


def format_fragment(fragment: str, *, indent: str = "", width: int = 72) -> str:
    """Render an HTML fragment as indented text wrapped at width columns.

    Paragraphs are separated by blank lines. Code blocks are kept verbatim
    and shown in green.
    """
    out: list[str] = []
    for block in fragment_to_blocks(fragment):
        if out:
            out.append("")
        if block.preformatted:
            out.extend(f"{indent}{GREEN}{line}{RESET}" for line in block.text.split("\n"))
            continue
        out.extend(indent + line for line in wrap_visible(block.text, width))
    return "\n".join(out) + "\n" if out else ""
