"""
Shared pytest fixtures and configuration for htmlguard tests.

This module provides:
- A reference HTML parser for checking what a browser-like tokenizer sees
- Payload corpora (benign, adversarial, fuzz fragments)
- Configuration fixtures and config-file writers
"""
from __future__ import annotations

import random
from html.parser import HTMLParser

import pytest


# ==============================================================================
# Reference parser
# ==============================================================================

class TagCollector(HTMLParser):
    """Record every start/end tag the standard library tokenizer reports."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.start_tags: list[tuple[str, list[tuple[str, str | None]]]] = []
        self.end_tags: list[str] = []

    def handle_starttag(self, tag, attrs):
        self.start_tags.append((tag, attrs))

    def handle_startendtag(self, tag, attrs):
        self.start_tags.append((tag, attrs))

    def handle_endtag(self, tag):
        self.end_tags.append(tag)


def collect_tags(markup: str) -> TagCollector:
    collector = TagCollector()
    collector.feed(markup)
    collector.close()
    return collector


@pytest.fixture
def parse_tags():
    """Return a function that tokenizes markup with the reference parser."""
    return collect_tags


# ==============================================================================
# Payload corpora
# ==============================================================================

BENIGN_SNIPPETS = [
    "<p>Weekly report</p>",
    "<p>Plain <b>bold</b> and <i>italic</i> text</p>",
    "<ul><li>one</li><li>two</li></ul>",
    "<h2 class=\"title\">Heading</h2>",
    "<table><thead><tr><th scope=\"col\">Name</th></tr></thead>"
    "<tbody><tr><td colspan=\"2\">Ana</td></tr></tbody></table>",
    "<a href=\"https://example.com/tasks/1\" title=\"Task\">open</a>",
    "<a href=\"https://example.com\" target=\"_blank\">new tab</a>",
    "<blockquote>quote</blockquote><pre><code>x = 1</code></pre>",
    "line one<br/>line two<br />line three",
    "<div id=\"journal\"><span style=\"color: red\">late</span></div>",
]

# Each of these must come out with no danger signature left in it.
ADVERSARIAL_MARKUP = [
    "<script>alert(1)</script><p>hi</p>",
    "<SCRIPT SRC=//evil.test/x.js></SCRIPT>",
    "<script>document.write('<img src=x onerror=alert(1)>')</script>",
    "<img src=x onerror=alert(1)>",
    "<svg/onload=alert(1)>",
    "<body onload=alert(1)>",
    "<p onclick=\"evil()\">hi</p>",
    "<div onmouseover='evil()'>hover</div>",
    "<a href=\"javascript:alert(1)\">x</a>",
    "<a href=\"JaVaScRiPt:alert(1)\">x</a>",
    "<a href=\"  javascript:alert(1)\">x</a>",
    "<a href=\"java\tscript:alert(1)\">x</a>",
    "<a href=\"\x01javascript:alert(1)\">x</a>",
    "<a href=\"vbscript:msgbox(1)\">x</a>",
    "<a href='data:text/html;base64,PHNjcmlwdD4='>x</a>",
    "<a href=file:///etc/passwd>x</a>",
    "<iframe src=\"https://evil.test\"></iframe>",
    "<object data=\"x.swf\"></object><embed src=\"x.swf\">",
    "<form action=\"https://evil.test\"><input name=q></form>",
    "<link rel=stylesheet href=\"https://evil.test/x.css\">",
    "<meta http-equiv=\"refresh\" content=\"0;url=https://evil.test\">",
    "<p style=\"width: expression(alert(1))\">x</p>",
    "<p style=\"background:url(javascript:alert(1))\">x</p>",
    "<p style=\"behavior: url(x.htc)\">x</p>",
    "<style>@import 'https://evil.test/x.css';</style>",
    "<scr<script>ipt>alert(1)</script>",
    "<<script>script>alert(1)<</script>/script>",
    "<!--<script>alert(1)</script>-->",
    "<!--[if IE]><script>alert(1)</script><![endif]-->",
    "<a href=\"https://ok.test\" onclick=\"evil()\" target=\"_blank\">x</a>",
    "<p/onclick=alert(1)>x</p>",
    "<td colspan=\"2\" onfocus=\"evil()\" autofocus>x</td>",
]

FUZZ_FRAGMENTS = [
    "<", ">", "/", "\"", "'", "=", " ", "\t", "\n", "!", "-", "--",
    "<!--", "-->", "<p", "</p", "<a", "<b", "<script", "</script", "<style",
    "<img", "<svg", "<iframe", "<td", "<div", "<marquee",
    " href=", " src=", " style=", " class=", " target=_blank", " rel=",
    " onclick=", " onerror=", " onload=", " title=",
    "javascript:", "vbscript:", "data:", "file:", "JAVASCRIPT:",
    "expression(", "@import", "behavior:", "alert(1)", "https://e.com",
    "text", "&", "&amp;", "é", "_x", "\x00",
]


def _fuzz_inputs(count: int = 400, seed: int = 1337) -> list[str]:
    """Deterministic pseudo-random markup assembled from FUZZ_FRAGMENTS."""
    rng = random.Random(seed)
    inputs = []
    for _ in range(count):
        size = rng.randint(1, 14)
        inputs.append("".join(rng.choice(FUZZ_FRAGMENTS) for _ in range(size)))
    return inputs


def pytest_generate_tests(metafunc):
    """Parametrize corpus-driven tests by argument name."""
    if "benign_snippet" in metafunc.fixturenames:
        metafunc.parametrize("benign_snippet", BENIGN_SNIPPETS)
    if "adversarial_payload" in metafunc.fixturenames:
        metafunc.parametrize("adversarial_payload", ADVERSARIAL_MARKUP)
    if "any_payload" in metafunc.fixturenames:
        metafunc.parametrize(
            "any_payload", BENIGN_SNIPPETS + ADVERSARIAL_MARKUP + _fuzz_inputs()
        )


# ==============================================================================
# Configuration fixtures
# ==============================================================================

@pytest.fixture
def default_config():
    """Return default configuration."""
    from htmlguard.config import Config
    return Config()


@pytest.fixture
def write_config(tmp_path):
    """Return a helper that writes YAML text to a config file and returns its path."""
    def _write(text: str, name: str = "config.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
