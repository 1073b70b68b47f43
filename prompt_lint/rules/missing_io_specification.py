"""Missing input/output specification rule."""

from __future__ import annotations

import re

from prompt_lint.models import RuleKind
from prompt_lint.rules.base import NO_ISSUE, RuleOutcome
from prompt_lint.text import contains_any, normalize

INPUT_INDICATORS = (
    "input", "parameter", "argument", "data", "array", "list", "string", "number", "integer",
    "object", "json", "csv", "file", "text", "value", "variable", "field", "property",
    "receives", "takes", "accepts", "given", "provided", "passed",
)  # fmt: skip

OUTPUT_INDICATORS = (
    "output", "return", "result", "response", "produce", "generate", "create", "build",
    "sorted", "filtered", "transformed", "formatted", "calculated", "processed",
    "returns", "outputs", "produces", "yields", "gives", "provides",
)  # fmt: skip

IO_CONTEXT_INDICATORS = (
    "function", "method", "algorithm", "sort", "search", "filter", "transform", "convert",
    "parse", "process", "calculate", "compute", "analyze", "validate", "format", "returns",
    "endpoint", "api", "service", "component", "connection", "authentication",
    "do", "make", "create", "build", "write", "implement",
)  # fmt: skip

# Input has to be stated explicitly; a bare data-type noun is not enough.
INPUT_TEMPLATES = (
    r"\b{ind}\s*:",
    r"\b{ind}\s*(?:is|are|should be)",
    r"\btakes?\s+\w*\s*{ind}",
    r"\binput\s+{ind}",
    r"\b{ind}\s+input",
    r"\breceives?\s+\w*\s*{ind}",
    r"\baccepts?\s+\w*\s*{ind}",
)

OUTPUT_TEMPLATES = (
    r"\b{ind}\b",
    r"\b{ind}\s*:",
    r"\b{ind}\s*(?:is|are|should be)",
    r"\bshould\s+{ind}",
)

MESSAGES = {
    (True, True): (
        "Input and output formats not specified",
        'Specify both input format (e.g., "array of integers") and expected output format',
    ),
    (True, False): (
        "Input format not specified",
        'Specify the input format (e.g., "array of integers", "string", "JSON object")',
    ),
    (False, True): (
        "Output format not specified",
        'Specify the expected output format (e.g., "sorted array", "boolean", '
        '"formatted string")',
    ),
}


class MissingIOSpecificationRule:
    """Flags processing requests that leave input or output format unstated."""

    kind = RuleKind.MISSING_IO_SPECIFICATION
    name = "Missing I/O Specification"
    description = "Detects prompts without clear input/output format specifications"

    def __init__(self) -> None:
        self._input_patterns = _compile(INPUT_INDICATORS, INPUT_TEMPLATES)
        self._output_patterns = _compile(OUTPUT_INDICATORS, OUTPUT_TEMPLATES)

    def analyze(self, text: str) -> RuleOutcome:
        cleaned = normalize(text)
        if not contains_any(cleaned, IO_CONTEXT_INDICATORS):
            return NO_ISSUE

        missing_input = not any(pattern.search(cleaned) for pattern in self._input_patterns)
        missing_output = not any(pattern.search(cleaned) for pattern in self._output_patterns)
        if not missing_input and not missing_output:
            return NO_ISSUE

        message, suggestion = MESSAGES[(missing_input, missing_output)]
        return RuleOutcome(has_issue=True, message=message, suggestion=suggestion)


def _compile(indicators: tuple[str, ...], templates: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(
        re.compile(template.replace("{ind}", re.escape(indicator)))
        for indicator in indicators
        for template in templates
    )
