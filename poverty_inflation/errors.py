"""Exceptions raised by the cleaning pipeline."""


class PipelineError(ValueError):
    """Base class for structural and parse errors in the pipeline."""


class MissingColumnError(PipelineError):
    """A required column (``country`` or the year columns) is absent."""


class ParseError(PipelineError):
    """A year label or numeric cell cannot be parsed."""
