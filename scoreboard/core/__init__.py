"""
Core scoreboard logic

This package holds everything with invariants:
- Match: immutable value entity and its validation
- MatchRegistry: lifecycle of matches in progress and the ranked summary
- Exceptions: typed failures for every broken rule
- Constants: limits and the team-name grammar
"""
