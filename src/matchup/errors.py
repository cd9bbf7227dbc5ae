class MatchupError(Exception):
    """
    Base error for matchup.

    Carries an optional underlying cause and a hint for the user. Both
    are rendered by __str__ so CLI output stays informative without a
    traceback.

    Args:
        message: Description of what went wrong
        cause: Exception that triggered this error. Defaults to None.
        hint: Suggestion for fixing the problem. Defaults to None.
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        hint: str | None = None,
    ):
        self.message = message
        self.cause = cause
        self.hint = hint
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.message]

        if self.cause is not None:
            parts.append(f"\nCaused by: {type(self.cause).__name__}: {self.cause}")

        if self.hint:
            parts.append(f"\nHint: {self.hint}")

        return "\n".join(parts)

    def __str__(self) -> str:
        return self._format()


class InvalidPatternError(MatchupError):
    """
    Raised when a specifier cannot be compiled into a matcher.

    Args:
        pattern: The offending specifier
        reason: Why compilation failed
        cause: Underlying exception, if any. Defaults to None.
        hint: Suggestion for fixing the pattern. Defaults to None.
    """

    def __init__(
        self,
        pattern: str,
        reason: str,
        cause: Exception | None = None,
        hint: str | None = None,
    ):
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Invalid pattern '{pattern}': {reason}", cause=cause, hint=hint
        )


class InaccessibleStartError(MatchupError):
    """
    Raised when the starting directory cannot be listed.

    Args:
        path: Starting directory
        reason: Why it could not be listed
        cause: Underlying OS error, if any. Defaults to None.
        hint: Suggestion for the user. Defaults to None.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        cause: Exception | None = None,
        hint: str | None = None,
    ):
        self.path = path
        self.reason = reason
        super().__init__(
            f"Cannot search from '{path}': {reason}", cause=cause, hint=hint
        )


class OptionsError(MatchupError):
    """Raised when search options fail validation."""
