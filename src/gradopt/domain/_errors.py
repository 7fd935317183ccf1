"""
Optimization-related exceptions for gradopt.

These errors let an optimizer fail fast at its own boundary, with a clear
message, instead of letting malformed inputs surface deep inside vector
arithmetic as an obscure broadcasting error or an out-of-bounds row access.
"""


class DimensionMismatchError(ValueError):
    """
    Raised when two quantities that must agree in size do not.

    Typical cases are a gradient whose length differs from the parameter
    vector, or a data set and target set with different row counts.

    Attributes
    ----------
    what : str
        Description of the mismatching quantity (e.g., "gradient").
    expected : int
        The size that was required.
    actual : int
        The size that was observed.
    """

    def __init__(self, what: str, expected: int, actual: int) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        what : str
            Name of the mismatching quantity.
        expected : int
            Required size.
        actual : int
            Observed size.
        """
        super().__init__(
            f"Dimension mismatch for {what}: expected {expected}, got {actual}."
        )
        self.what = what
        self.expected = expected
        self.actual = actual


class EmptyDatasetError(ValueError):
    """
    Raised when an optimizer that visits individual rows receives a data set
    without any rows.

    Attributes
    ----------
    algorithm : str
        Name of the optimizer that rejected the data set.
    """

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"{algorithm} requires at least one data row, got 0.")
        self.algorithm = algorithm


class UntrainedModelError(RuntimeError):
    """
    Raised when a model is used for prediction before it has been trained.
    """

    def __init__(self, model: str) -> None:
        super().__init__(f"{model} has not been trained yet; call train() first.")
        self.model = model
