# -----------------------------------------------------------------------------
# Case catalogue loader & runner
# Purpose: Parse the canned (s1, s2, expected) anagram cases from YAML into
# typed records, and replay them through the engine as a regression/demo set.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import yaml
from dataclasses import dataclass
from typing import Any, Dict, List

from .engine import AnagramTraceEngine

logger = logging.getLogger(__name__)


# Domain-specific error to signal malformed catalogue inputs, missing fields, etc.
class CatalogError(Exception): pass


@dataclass(frozen=True)
class AnagramCase:
    s1: str
    s2: str
    expected: bool
    name: str = ""


@dataclass(frozen=True)
class CaseOutcome:
    case: AnagramCase
    actual: bool
    steps: int
    elapsed_ms: float

    @property
    def passed(self) -> bool: return self.actual == self.case.expected

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.case.name, "s1": self.case.s1, "s2": self.case.s2,
            "expected": self.case.expected, "actual": self.actual, "passed": self.passed,
            "steps": self.steps, "elapsed_ms": self.elapsed_ms,
        }


@dataclass
class CaseCatalog:
    cases: List[AnagramCase]

    @staticmethod
    def _parse_case(i: int, cd: Any) -> AnagramCase:
        if not isinstance(cd, dict):
            raise CatalogError(f"Case #{i} must be a mapping, got {type(cd).__name__}")
        for key in ("s1", "s2", "expected"):
            if key not in cd:
                raise CatalogError(f"Case #{i} is missing required key '{key}'")
        s1, s2, expected = cd["s1"], cd["s2"], cd["expected"]
        # YAML turns bare `no`/`123` into bool/int; insist on quoted strings
        if not isinstance(s1, str) or not isinstance(s2, str):
            raise CatalogError(f"Case #{i}: s1 and s2 must be strings")
        if not isinstance(expected, bool):
            raise CatalogError(f"Case #{i}: expected must be true or false")
        return AnagramCase(s1=s1, s2=s2, expected=expected, name=str(cd.get("name") or f"{s1}/{s2}"))

    @staticmethod
    def from_yaml_dict(d: Dict[str, Any]) -> "CaseCatalog":
        """
        Build a CaseCatalog from a pre-parsed YAML dictionary.
        Expected YAML shape:
          cases:
            - { s1: "restful", s2: "fluster", expected: true, name: "optional" }
        """
        if not isinstance(d, dict):
            raise CatalogError("Catalog root must be a mapping with a 'cases' list")
        raw = d.get("cases") or []
        if not isinstance(raw, list):
            raise CatalogError("'cases' must be a list")
        return CaseCatalog(cases=[CaseCatalog._parse_case(i, cd) for i, cd in enumerate(raw)])

    @staticmethod
    def from_yaml_text(text: str) -> "CaseCatalog":
        # yaml.safe_load: no arbitrary object constructors
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML: {e}") from e
        return CaseCatalog.from_yaml_dict(data)

    @staticmethod
    def from_file(path: str) -> "CaseCatalog":
        with open(path, "r", encoding="utf-8") as f:
            return CaseCatalog.from_yaml_text(f.read())

    def list_cases(self) -> List[Dict[str, Any]]:
        """UI-friendly listing (index, name, s1, s2, expected)."""
        return [
            {"index": i, "name": c.name, "s1": c.s1, "s2": c.s2, "expected": c.expected}
            for i, c in enumerate(self.cases)
        ]

    def get(self, index: int) -> AnagramCase:
        if not 0 <= index < len(self.cases):
            raise CatalogError(f"No case at index {index}")
        return self.cases[index]

    def run(self, engine: AnagramTraceEngine) -> List[CaseOutcome]:
        outcomes = []
        for case in self.cases:
            res = engine.run(case.s1, case.s2)
            outcome = CaseOutcome(case=case, actual=res.verdict, steps=len(res.steps), elapsed_ms=res.elapsed_ms)
            if not outcome.passed:
                logger.warning("Case %s expected %s, engine returned %s", case.name, case.expected, res.verdict)
            outcomes.append(outcome)
        return outcomes
