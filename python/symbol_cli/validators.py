# オプション値の検証
import re
from typing import Callable, Optional, Sequence

import typer

from symbol_cli.errors import ValidationError

UINT64_MAX: int = 2**64 - 1
MOSAIC_ID_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]{1,16}$")
NUMERIC_PATTERN = re.compile(r"^[0-9]+$")


class Validator:
    def validate(self, value: str) -> str:
        raise NotImplementedError

    def as_callback(self) -> Callable[[Optional[str]], Optional[str]]:
        # typerのcallbackとして使う（未指定の場合はプロンプト側で検証する）
        def callback(value: Optional[str]) -> Optional[str]:
            if value is None:
                return None
            try:
                return self.validate(value)
            except ValidationError as e:
                raise typer.BadParameter(str(e))

        return callback


class ChoiceValidator(Validator):
    def __init__(self, label: str, choices: Sequence[str]) -> None:
        self.label = label
        self.choices = tuple(choices)

    def validate(self, value: str) -> str:
        normalized: str = value.strip().lower()
        if normalized not in self.choices:
            raise ValidationError(
                f"{self.label} must be one of ({', '.join(self.choices)}), got '{value}'"
            )
        return normalized


class AccountRestrictionTypeValidator(ChoiceValidator):
    def __init__(self) -> None:
        super().__init__("Restriction type", ("allow", "block"))


class AccountRestrictionDirectionValidator(ChoiceValidator):
    def __init__(self) -> None:
        super().__init__("Restriction direction", ("incoming", "outgoing"))


class BinaryValidator(Validator):
    def validate(self, value: str) -> str:
        normalized: str = value.strip()
        if normalized not in ("0", "1"):
            raise ValidationError(f"The value must be 0 or 1, got '{value}'")
        return normalized


class MosaicIdValidator(Validator):
    """Hexadecimal mosaic id, up to 16 digits with an optional 0x prefix."""

    def validate(self, value: str) -> str:
        normalized: str = value.strip()
        if not MOSAIC_ID_PATTERN.match(normalized):
            raise ValidationError(f"Invalid mosaic id '{value}'")
        return normalized


class NumericStringValidator(Validator):
    def validate(self, value: str) -> str:
        normalized: str = value.strip()
        if not NUMERIC_PATTERN.match(normalized) or int(normalized) > UINT64_MAX:
            raise ValidationError(f"The value must be a non-negative integer, got '{value}'")
        return normalized


def parse_mosaic_id(value: str) -> int:
    return int(MosaicIdValidator().validate(value), 16)
