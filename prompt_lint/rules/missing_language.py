"""Missing programming language rule."""

from __future__ import annotations

import re

from prompt_lint.models import RuleKind
from prompt_lint.rules.base import NO_ISSUE, RuleOutcome
from prompt_lint.text import contains_any, normalize

PROGRAMMING_LANGUAGES = (
    # general purpose
    "javascript", "js", "typescript", "ts", "python", "py", "java", "c++", "cpp", "c#",
    "csharp", "c", "go", "golang", "rust", "php", "ruby", "swift", "kotlin", "scala", "dart",
    # web
    "html", "css", "scss", "sass", "jsx", "tsx", "vue", "react", "angular",
    # other
    "bash", "shell", "powershell", "sql", "r", "matlab", "perl", "haskell", "clojure",
    "lua", "assembly", "asm", "vb", "vba", "fortran", "cobol", "ada", "erlang", "elixir",
    # runtimes
    "node", "nodejs", "deno", "bun",
)  # fmt: skip

CODE_INDICATORS = (
    "function", "class", "method", "algorithm", "code", "script", "program", "app",
    "application", "implementation", "library", "module", "component", "service", "api",
    "endpoint", "quicksort", "bubblesort", "mergesort", "binary search", "linked list", "tree",
    "graph", "database", "query", "server", "client", "frontend", "backend", "fullstack",
    # web
    "navbar", "navigation", "responsive", "website", "webpage", "html", "css", "dom",
    # testing
    "unit test", "test", "testing", "spec", "mock", "stub",
    # systems
    "system", "authentication", "auth", "login", "session", "security",
    # debugging
    "debug", "fix", "error", "bug", "issue", "troubleshoot",
    # generic actions
    "do", "make", "create", "build", "write", "implement",
)  # fmt: skip

EXPLANATION_INDICATORS = (
    "explain",
    "describe",
    "document",
    "what is",
    "how does",
    "why does",
    "show me",
    "tell me",
    "help me understand",
    "clarify",
    "outline",
    "overview",
)

# {lang} is replaced with the escaped language name.
LANGUAGE_TEMPLATES = (
    r"\b{lang}\b",
    r"\bin {lang}\b",
    r"\busing {lang}\b",
    r"\bwith {lang}\b",
    r"\b{lang} code\b",
    r"\b{lang} function\b",
    r"\b{lang} script\b",
)


class MissingLanguageRule:
    """Flags code-generation requests that never name a programming language."""

    kind = RuleKind.MISSING_LANGUAGE
    name = "Missing Programming Language"
    description = "Detects code generation requests without specified programming language"

    def __init__(self) -> None:
        patterns: list[re.Pattern[str]] = []
        for language in PROGRAMMING_LANGUAGES:
            escaped = re.escape(language)
            for template in LANGUAGE_TEMPLATES:
                patterns.append(re.compile(template.replace("{lang}", escaped), re.IGNORECASE))
        self._language_patterns = tuple(patterns)

    def analyze(self, text: str) -> RuleOutcome:
        cleaned = normalize(text)

        if contains_any(cleaned, EXPLANATION_INDICATORS):
            return NO_ISSUE
        if not contains_any(cleaned, CODE_INDICATORS):
            return NO_ISSUE
        if any(pattern.search(cleaned) for pattern in self._language_patterns):
            return NO_ISSUE

        return RuleOutcome(
            has_issue=True,
            message="Programming language not specified for code generation request",
            suggestion="Specify the programming language (e.g., Python, JavaScript, Java, C++, etc.)",
        )
