from __future__ import annotations

from .corpus import Case, build_diagnostic, generate_cases

__all__ = ["Case", "build_diagnostic", "generate_cases"]
