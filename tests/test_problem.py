import itertools

from algotrace.engine import trace_anagram
from algotrace.problem import PROBLEM, anagrams, problem_payload, solution_source

def test_reference_solution_agrees_with_engine():
    words = ["", "a", "ab", "ba", "aab", "aba", "abb", "restful", "fluster", "cats", "tocs"]
    for s1, s2 in itertools.product(words, repeat=2):
        assert anagrams(s1, s2) == trace_anagram(s1, s2).verdict

def test_problem_payload():
    payload = problem_payload()
    assert payload["time"] == "O(n + m)" and payload["space"] == "O(n)"
    assert payload["difficulty"] == "Easy"
    assert payload["solution"] == solution_source()
    assert solution_source().startswith("def anagrams(s1: str, s2: str) -> bool:")
    assert "solution" not in PROBLEM
