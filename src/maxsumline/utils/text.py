from typing import Iterable


def join_numbers(values: Iterable[int], separator: str = ", ") -> str:
    if values is None:
        raise ValueError("values must not be None")
    return separator.join(str(value) for value in values)
