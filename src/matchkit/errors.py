"""Errors raised while building matchers."""


class MatcherConstructionError(ValueError):
    """A matcher was built with arguments it can never meaningfully match.

    Raised at construction time so that a broken assertion stops the test
    immediately instead of silently passing or failing.
    """
