from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Optional, Tuple


NumberedLines = Dict[int, str]


@dataclass(frozen=True)
class AnalysisResult:
    lines_with_max_sum: Tuple[int, ...] = ()
    invalid_lines: Tuple[int, ...] = ()

    @classmethod
    def create(
        cls,
        lines_with_max_sum: Optional[Iterable[int]],
        invalid_lines: Optional[Iterable[int]],
    ) -> "AnalysisResult":
        return cls(
            lines_with_max_sum=tuple(sorted(set(lines_with_max_sum or ()))),
            invalid_lines=tuple(sorted(set(invalid_lines or ()))),
        )

    @classmethod
    def empty(cls) -> "AnalysisResult":
        return cls()

    @property
    def any_valid_line(self) -> bool:
        return bool(self.lines_with_max_sum)

    @property
    def any_invalid_line(self) -> bool:
        return bool(self.invalid_lines)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["any_valid_line"] = self.any_valid_line
        data["any_invalid_line"] = self.any_invalid_line
        return data
