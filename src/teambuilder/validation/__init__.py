from teambuilder.validation.checker import (
    CheckReport,
    CheckStatus,
    SuggestionChecker,
    Violation,
    ViolationKind,
    check_suggestions,
    create_suggestion_checker,
)

__all__ = [
    "CheckReport",
    "CheckStatus",
    "SuggestionChecker",
    "Violation",
    "ViolationKind",
    "check_suggestions",
    "create_suggestion_checker",
]
