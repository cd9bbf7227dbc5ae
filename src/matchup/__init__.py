"""
matchup: find a file, glob or directory up from where you are.

Searches the starting directory and then each ancestor in turn, returning
the nearest entry that matches.

Public API:
    matchup: Coroutine performing one upward search
    matchup_sync: Blocking wrapper around matchup
    Match: Path descriptor returned for a match
    SearchOptions: Validated options for a search
    MatchupError: Base class for all matchup errors
    InvalidPatternError: Specifier could not be parsed
    InaccessibleStartError: Starting directory could not be listed
    OptionsError: Search options failed validation
"""

from matchup.api import matchup, matchup_sync
from matchup.errors import (
    InaccessibleStartError,
    InvalidPatternError,
    MatchupError,
    OptionsError,
)
from matchup.options import SearchOptions
from matchup.results import Match

__version__ = "0.1.0"

__all__ = [
    "matchup",
    "matchup_sync",
    "Match",
    "SearchOptions",
    "MatchupError",
    "InvalidPatternError",
    "InaccessibleStartError",
    "OptionsError",
]
