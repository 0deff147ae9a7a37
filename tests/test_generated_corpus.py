from __future__ import annotations

from caretdiag import Charset, PlainStyler, strip_styles
from caretdiag.testing import build_diagnostic, generate_cases


def test_generated_corpus_renders_and_is_stable() -> None:
    # Large enough to be meaningful, small enough to keep CI fast.
    cases = generate_cases(seed=1, count=300)
    assert cases == generate_cases(seed=1, count=300)

    for case in cases:
        diag = build_diagnostic(case)
        out = diag.render(PlainStyler())
        assert diag.render(PlainStyler()) == out
        assert strip_styles(diag.render()) == out

        lines = out.splitlines()
        assert lines[0] == case.message
        width = len(str(max(diag.source.line_count, 1)))
        assert lines[len(lines) - len(case.notes) :] == [" " * width + " > " + n for n in case.notes]
        for _, _, message in case.labels:
            assert message in out


def test_generated_corpus_unicode_charset() -> None:
    for case in generate_cases(seed=7, count=100):
        out = build_diagnostic(case, charset=Charset.unicode()).render_plain()
        assert ("¦" in out) == bool(case.labels)
