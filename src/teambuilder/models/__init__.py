from teambuilder.models.team import SuggestionResult, TeamMember, TeamSuggestion

__all__ = [
    "TeamMember",
    "TeamSuggestion",
    "SuggestionResult",
]
