"""Error taxonomy for the ingredient-to-recipe pipeline."""


class PantryChefError(Exception):
    """Base class for errors surfaced to callers."""


class Unconfigured(PantryChefError):
    """The model credential is missing or a placeholder."""


class InvalidInput(PantryChefError):
    """The caller supplied an empty image or ingredient list."""


class UpstreamFailure(PantryChefError):
    """The model call failed; the upstream message is kept for diagnostics."""


class ExtractionFailed(UpstreamFailure):
    """Image ingredient extraction failed upstream."""


class RecipeGenerationFailed(UpstreamFailure):
    """Recipe generation failed upstream."""


class ModelCallError(Exception):
    """Raised by completion clients when the model service call fails."""
