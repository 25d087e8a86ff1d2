"""Exception hierarchy for Moorecurve."""


class MooreCurveError(Exception):
    """Base exception for all Moorecurve errors."""

    pass


class GenerationError(MooreCurveError):
    """Errors raised while generating curve points."""

    pass


class InvalidDegreeError(GenerationError):
    """Curve degree outside the supported range."""

    def __init__(self, degree: int, min_degree: int = 1, max_degree: int = 15) -> None:
        self.degree = degree
        self.min_degree = min_degree
        self.max_degree = max_degree
        super().__init__(
            f"Invalid moore curve degree {degree}. "
            f"The number must be between {min_degree} and {max_degree}"
        )


class AllocationFailureError(GenerationError):
    """Working buffers for a generation could not be allocated."""

    def __init__(self, degree: int, reason: str) -> None:
        self.degree = degree
        self.reason = reason
        super().__init__(
            f"Failed memory allocation for degree {degree}: {reason}. "
            "Moore curve degree is too big"
        )


class UnknownSolutionTypeError(MooreCurveError):
    """Solution type code does not map to a generator."""

    def __init__(self, code: object, supported: int = 3) -> None:
        self.code = code
        self.supported = supported
        super().__init__(
            f"Unsupported solution type {code!r}. "
            f"Use a number between 0 and {supported - 1}"
        )


class OutputError(MooreCurveError):
    """Errors related to writing output files."""

    pass


class OutputWriteError(OutputError):
    """Error writing an output file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class ConfigurationError(MooreCurveError):
    """Invalid combination of run options."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
