"""Failure taxonomy for the submission flow and the reporting surface.

Only ``AnalysisRequestFailure`` and ``MalformedAnalysisError`` reach the user
and block the flow. The remaining failures degrade to missing data and are
logged by whoever catches them.
"""


class IdeaValidatorError(Exception):
    """Base class for all application errors."""


class AnalysisRequestFailure(IdeaValidatorError):
    """The generative-AI call did not complete (network, status, empty body)."""


class MalformedAnalysisError(IdeaValidatorError, ValueError):
    """The AI payload cannot be mapped to an AnalysisResult."""


class PersistenceFailure(IdeaValidatorError):
    """Writing an idea record to the document store failed."""


class SideChannelFailure(IdeaValidatorError):
    """The best-effort sheet export failed."""


class FetchFailure(IdeaValidatorError):
    """Reading an owner's idea history from the document store failed."""
