"""Tests for the built-in prompt rules and the rule registry."""

from __future__ import annotations

import pytest

from prompt_lint.models import RuleKind, Severity, Span
from prompt_lint.rules import (
    NO_ISSUE,
    MissingIOSpecificationRule,
    MissingLanguageRule,
    MissingTaskVerbRule,
    RedundantLanguageRule,
    UnclearScopeRule,
    VagueWordingRule,
    build_rules,
    default_rules,
    get_rule,
    list_rule_info,
)
from prompt_lint.rules.missing_task_verb import MISSING_MESSAGE, UNCLEAR_MESSAGE


def test_task_verb_rule_accepts_strong_verbs_anywhere() -> None:
    rule = MissingTaskVerbRule()
    for prompt in (
        "implement quicksort",
        "Please write a function",
        "can you explain recursion",
        "the parser needs a refactor",
    ):
        assert rule.analyze(prompt) == NO_ISSUE, prompt


def test_task_verb_rule_flags_weak_verbs_as_unclear() -> None:
    outcome = MissingTaskVerbRule().analyze("make it better")
    assert outcome.has_issue is True
    assert outcome.message == UNCLEAR_MESSAGE
    assert outcome.suggestion is not None


def test_task_verb_rule_flags_missing_verb() -> None:
    rule = MissingTaskVerbRule()
    for prompt in ("quicksort in python", "rewrite the parser"):
        outcome = rule.analyze(prompt)
        assert outcome.has_issue is True, prompt
        assert outcome.message == MISSING_MESSAGE


def test_language_rule_flags_code_request_without_language() -> None:
    outcome = MissingLanguageRule().analyze("write a sorting function")
    assert outcome.has_issue is True
    assert outcome.message == "Programming language not specified for code generation request"
    assert "Python" in (outcome.suggestion or "")


def test_language_rule_accepts_named_languages() -> None:
    rule = MissingLanguageRule()
    for prompt in (
        "write C++ code",
        "create function in Node.js",
        "build a component using React",
        "implement quicksort in Python",
    ):
        assert rule.analyze(prompt) == NO_ISSUE, prompt


def test_language_rule_skips_explanations_and_non_code_prompts() -> None:
    rule = MissingLanguageRule()
    assert rule.analyze("explain how quicksort works") == NO_ISSUE
    assert rule.analyze("summarize the history of rome") == NO_ISSUE


def test_io_rule_reports_which_side_is_missing() -> None:
    rule = MissingIOSpecificationRule()

    both = rule.analyze("write quicksort in Python")
    assert both.message == "Input and output formats not specified"

    output_only = rule.analyze("function that takes array of integers")
    assert output_only.message == "Output format not specified"

    input_only = rule.analyze("create function that sorts array of numbers")
    assert input_only.message == "Input format not specified"


def test_io_rule_accepts_explicit_io_and_ignores_non_processing_prompts() -> None:
    rule = MissingIOSpecificationRule()
    assert (
        rule.analyze("implement quicksort in Python with input array and output sorted array")
        == NO_ISSUE
    )
    assert rule.analyze("summarize the history of rome") == NO_ISSUE


def test_vague_wording_rule_lists_terms_in_table_order_with_span() -> None:
    prompt = "maybe write something like quicksort somehow"
    outcome = VagueWordingRule().analyze(prompt)

    assert outcome.has_issue is True
    assert outcome.message == 'Vague terms detected: "maybe", "somehow", "something like"'
    assert outcome.span == Span(start=0, end=5)
    assert outcome.suggestion == (
        "Replace vague terms with specific, precise language "
        '(e.g. "maybe" -> "optionally"; "somehow" -> "using a specific method")'
    )


def test_vague_wording_rule_is_case_insensitive_and_uses_original_offsets() -> None:
    prompt = "  Basically sort this"
    outcome = VagueWordingRule().analyze(prompt)
    assert outcome.span == Span(start=2, end=11)
    assert prompt[2:11] == "Basically"


def test_vague_wording_rule_hedge_words_have_no_rewrite_hint() -> None:
    outcome = VagueWordingRule().analyze("Perhaps sort the list")
    assert outcome.message == 'Vague terms detected: "perhaps"'
    assert outcome.suggestion == "Replace vague terms with specific, precise language"


def test_vague_wording_rule_matches_whole_words_only() -> None:
    assert VagueWordingRule().analyze("adjust the threshold") == NO_ISSUE


def test_unclear_scope_rule_collects_reasons_in_order() -> None:
    rule = UnclearScopeRule()

    outcome = rule.analyze("make it better")
    assert outcome.message == (
        "Task scope unclear: vague task descriptor without scope clarification, "
        "unclear quality requirements"
    )

    outcome = rule.analyze("fix that bug")
    assert outcome.message == (
        "Task scope unclear: vague task descriptor without scope clarification, vague references"
    )

    outcome = rule.analyze("handle everything")
    assert outcome.message == (
        "Task scope unclear: overly broad scope, insufficient detail for scope definition"
    )


def test_unclear_scope_rule_flags_short_prompts() -> None:
    outcome = UnclearScopeRule().analyze("build parser")
    assert outcome.message == "Task scope unclear: insufficient detail for scope definition"


def test_unclear_scope_rule_treats_relative_that_as_specific() -> None:
    rule = UnclearScopeRule()
    assert (
        rule.analyze("implement a function that returns the sum of two integers in Python")
        == NO_ISSUE
    )
    assert rule.analyze("implement quicksort") == NO_ISSUE


def test_redundant_language_rule_needs_accumulated_signals() -> None:
    rule = RedundantLanguageRule()
    assert rule.analyze("really good") == NO_ISSUE

    outcome = rule.analyze("really very long prompt")
    assert outcome.has_issue is True
    assert outcome.message == "Redundant language detected: filler words: really, very"
    assert outcome.suggestion == "Remove unnecessary words and simplify expressions for clarity"


def test_redundant_language_rule_always_fires_on_known_phrases() -> None:
    rule = RedundantLanguageRule()

    outcome = rule.analyze("in order to sort the list, use quicksort")
    assert outcome.message == "Redundant language detected: redundant phrases"
    assert outcome.suggestion == (
        'Remove unnecessary words and simplify expressions for clarity (e.g. "in order to" -> "to")'
    )

    outcome = rule.analyze("please note that the output is sorted")
    assert outcome.suggestion == (
        'Remove unnecessary words and simplify expressions for clarity (e.g. drop "please note that")'
    )


def test_redundant_language_rule_counts_repeated_words() -> None:
    outcome = RedundantLanguageRule().analyze("really sort numbers, sort strings, sort dates")
    assert outcome.message == "Redundant language detected: filler words: really, repeated words"


def test_rules_are_deterministic() -> None:
    prompt = "maybe just make something like a tool, in order to do stuff"
    for rule in default_rules():
        assert rule.analyze(prompt) == rule.analyze(prompt)


def test_registry_order_matches_rule_kinds() -> None:
    assert [rule.kind for rule in default_rules()] == list(RuleKind)
    info = list_rule_info()
    assert [item.kind for item in info] == list(RuleKind)
    by_kind = {item.kind: item for item in info}
    assert by_kind[RuleKind.MISSING_LANGUAGE].default_severity is Severity.HIGH
    assert by_kind[RuleKind.REDUNDANT_LANGUAGE].default_severity is Severity.LOW
    assert all(item.default_enabled for item in info)


def test_build_rules_filters_and_rejects_unknown_kinds() -> None:
    rules = build_rules(enabled_kinds=["vague_wording", RuleKind.MISSING_TASK_VERB])
    assert [rule.kind for rule in rules] == [RuleKind.MISSING_TASK_VERB, RuleKind.VAGUE_WORDING]

    rules = build_rules(disabled_kinds=["redundant_language"])
    assert RuleKind.REDUNDANT_LANGUAGE not in [rule.kind for rule in rules]

    with pytest.raises(ValueError, match="Unknown rule kinds: nope"):
        build_rules(disabled_kinds=["nope"])


def test_get_rule_returns_none_for_unknown_kind() -> None:
    rule = get_rule("unclear_scope")
    assert isinstance(rule, UnclearScopeRule)
    assert get_rule("nope") is None
