"""Typed failures raised by the assessment engine."""


class AssessmentError(ValueError):
    """Base class for all assessment failures."""


class UnknownCategory(AssessmentError):
    """A measurement references a category id that is not registered."""

    def __init__(self, category_id):
        self.category_id = category_id
        super().__init__(f"Unknown exercise category: {category_id!r}")


class InvalidMeasurementValue(AssessmentError):
    """A raw value is negative, malformed, or not a recognized grade."""

    def __init__(self, category_id: int, value, reason: str):
        self.category_id = category_id
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for category {category_id}: {reason}")


class EmptyResultSet(AssessmentError):
    """Summary requested over zero category results."""

    def __init__(self, message: str = "Cannot summarize an empty result set"):
        super().__init__(message)


class DuplicateCategoryInBatch(AssessmentError):
    """The same category id appears more than once in one batch."""

    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Category {category_id} appears more than once in the batch")


class InvalidMemberProfile(AssessmentError):
    """Member biometrics cannot be used for threshold scaling."""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid member {field} {value!r}: {reason}")


class FlagsMismatch(AssessmentError):
    """Technique flags do not belong to the category they were given for."""

    def __init__(self, category_id: int, flags):
        self.category_id = category_id
        self.flags = flags
        super().__init__(
            f"{type(flags).__name__} cannot be used for category {category_id}"
        )
