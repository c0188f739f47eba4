"""Error taxonomy for column construction, lookup and statistics."""


class TabstatError(Exception):
    pass


class InvalidColumnTypeError(TabstatError):
    def __init__(self, name: str, reason: str = "") -> None:
        message = (
            f"Error in column named `{name}`. Invalid data type, "
            "couldn't match with any."
        )
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.name = name
        self.reason = reason


class OutOfRangeError(TabstatError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index `{index}` is out of range for length `{length}`")
        self.index = index
        self.length = length


class InvalidRangeError(TabstatError):
    def __init__(self, begin: int, end: int, length: int) -> None:
        super().__init__(
            f"Invalid range `{begin}..{end}` for column of length `{length}`"
        )
        self.begin = begin
        self.end = end
        self.length = length


class MissingColumnError(TabstatError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Column `{name}` not found in DataFrame")
        self.name = name


class InvalidQuantileError(TabstatError):
    def __init__(self, value: float) -> None:
        super().__init__(
            f"Invalid quantile `{value}`, value must be in the range [0, 1)"
        )
        self.value = value


class InvalidMetricTypeError(TabstatError):
    def __init__(self, name: str, metric: str) -> None:
        super().__init__(
            f"Column `{name}` doesn't have a datatype where `{metric}` "
            "can be calculated"
        )
        self.name = name
        self.metric = metric


class EmptyColumnError(TabstatError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Column `{name}` cannot be empty")
        self.name = name


class InsufficientDataError(TabstatError):
    def __init__(self, name: str, required: int, actual: int) -> None:
        super().__init__(
            f"Column `{name}` needs more than {required} values, got {actual}"
        )
        self.name = name
        self.required = required
        self.actual = actual


class ColumnLengthMismatchError(TabstatError):
    def __init__(self, name: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Column `{name}` has {actual} rows, expected {expected}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual
