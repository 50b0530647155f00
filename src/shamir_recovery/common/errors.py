class RecoveryError(Exception):
    """Base class for every failure raised while recovering a secret."""


class MalformedShare(RecoveryError, ValueError):
    def __init__(self, base, raw_value, reason: str, x_label: int | None = None):
        self.base = base
        self.raw_value = raw_value
        self.reason = reason
        self.x_label = x_label
        where = f" (share {x_label})" if x_label is not None else ""
        super().__init__(
            f"malformed share{where}: {raw_value!r} in base {base}: {reason}"
        )

    def with_label(self, x_label: int) -> "MalformedShare":
        return MalformedShare(self.base, self.raw_value, self.reason, x_label)


class InsufficientPoints(RecoveryError):
    def __init__(self, required: int, actual: int):
        self.required = required
        self.actual = actual
        super().__init__(
            f"Insufficient points provided. Need {required} points but got {actual}"
        )


class DuplicateXCoordinate(RecoveryError):
    def __init__(self, x: int):
        self.x = x
        super().__init__(f"duplicate x-coordinate {x} among selected points")


class MalformedCase(RecoveryError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"malformed case: {reason}")


class CaseProcessingFailed(RecoveryError):
    def __init__(self, case_id: str, cause: Exception):
        self.case_id = case_id
        self.cause = cause
        super().__init__(f"Error processing test case {case_id}: {cause}")
