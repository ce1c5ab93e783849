# -----------------------------------------------------------------------------
# Problem statement & reference solution
# Purpose:
#   Static description of the anagrams exercise (statement, complexity,
#   difficulty, walkthrough, insights) plus the plain untraced solution the
#   playground shows under "Show Solution". The solution's source text is read
#   with inspect so the panel always matches the code the tests run.
# -----------------------------------------------------------------------------

from __future__ import annotations
import inspect
from typing import Any, Dict


def anagrams(s1: str, s2: str) -> bool:
    if len(s1) != len(s2):
        return False

    count = {}
    for char in s1:
        count[char] = count.get(char, 0) + 1

    for char in s2:
        if char not in count:
            return False
        count[char] -= 1
        if count[char] == 0:
            del count[char]

    return not count


PROBLEM: Dict[str, Any] = {
    "title": "Anagrams Problem",
    "statement": (
        "Write a function that takes two strings and returns true if they are anagrams. "
        "Anagrams are strings that contain the same characters, but in any order."
    ),
    "time": "O(n + m)",
    "space": "O(n)",
    "difficulty": "Easy",
    "complexity_notes": {
        "time": "Single pass through both strings",
        "space": "Character count object",
        "legend": "n = length of string 1, m = length of string 2",
    },
    "steps": [
        "Return false if the lengths differ",
        "Count all characters in first string",
        "Decrement counts for second string characters",
        "Return false if character not found",
        "Verify the count object is empty",
    ],
    "insights": [
        "This approach is more efficient than sorting both strings (which would be O(n log n))",
        "Early termination when a character is not found saves computation time",
        "A dict provides O(1) average case lookup and update operations",
        "Deleting keys that reach zero makes the final check a simple emptiness test",
    ],
}


def solution_source() -> str:
    return inspect.getsource(anagrams)


def problem_payload() -> Dict[str, Any]:
    # JSON-ready copy for the API
    return {**PROBLEM, "solution": solution_source()}
