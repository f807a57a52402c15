"""
QuizCraft — Error Taxonomy
===========================
Every failure a request can hit maps onto one of these. They subclass the
builtin ValueError / RuntimeError so callers that only care about
"bad input" vs "provider trouble" can keep catching the builtins.
"""

from typing import Optional


class QuizCraftError(Exception):
    """Base class for all QuizCraft errors."""


class InputMissing(QuizCraftError, ValueError):
    """No usable source text, or zero questions requested."""


class UnsupportedFileType(QuizCraftError, ValueError):
    """Uploaded file is neither text-like nor PDF."""

    ALLOWED_EXTENSIONS = (".txt", ".pdf")

    def __init__(self, filename: Optional[str] = None):
        self.filename = filename
        allowed = " or ".join(self.ALLOWED_EXTENSIONS)
        super().__init__(f"Unsupported file type. Please upload a {allowed} file.")


class UnreadableFile(QuizCraftError, ValueError):
    """File bytes could not be parsed as their declared format."""


class GenerationFailed(QuizCraftError, RuntimeError):
    """The provider call itself errored (network, auth, quota, timeout)."""

    def __init__(self, provider_message: str):
        self.provider_message = provider_message
        super().__init__(f"Failed to generate quiz: {provider_message}")


class MalformedResponse(QuizCraftError, ValueError):
    """Provider answered, but not with a usable quiz."""


class ConfigurationError(QuizCraftError, RuntimeError):
    """Startup configuration is missing or invalid."""
