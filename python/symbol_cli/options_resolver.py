# オプションが指定されていなければ対話形式で入力を求める
from typing import Optional

import typer

from symbol_cli.validators import Validator


def resolve_option(
    value: Optional[str],
    prompt: str,
    validator: Optional[Validator] = None,
    default: Optional[str] = None,
) -> str:
    if value is None:
        # 末尾の": "はtyper側で付与される
        value = typer.prompt(prompt.rstrip().rstrip(":"), default="", show_default=False)
        if value == "" and default is not None:
            return default
    if validator is not None:
        return validator.validate(value)
    return value
