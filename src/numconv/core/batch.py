import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..errors import NumeralError
from ..utils.patterns import parse_arabic
from .japanese import to_japanese
from .roman import to_arabic, to_roman

logger = logging.getLogger(__name__)

MODES = ("roman", "japanese")


@dataclass
class ConversionResult:
    input: Union[str, int]
    output: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


def convert_one(item: Union[str, int], mode: str = "roman", use_unicode: bool = False) -> str:
    """
    Convert a single value the way the CLI routes it.

    roman: Arabic digits are encoded, anything else is decoded.
    japanese: the value must be an Arabic number.
    """
    text = item if isinstance(item, str) else str(item)
    number = parse_arabic(text)

    if mode == "japanese":
        if number is None:
            raise NumeralError(f"Not an unsigned integer: {text}")
        return to_japanese(number)

    if number is not None:
        return to_roman(number, use_unicode)
    return str(to_arabic(text))


class BatchConverter:
    def __init__(self, input_path: Path, mode: str = "roman", use_unicode: bool = False):
        if mode not in MODES:
            raise ValueError(f"Invalid mode: {mode}. Must be one of {MODES}.")
        self.input_path = input_path
        self.mode = mode
        self.use_unicode = use_unicode

    def _load_inputs(self) -> List[Union[str, int]]:
        if not self.input_path.exists():
            raise FileNotFoundError(f"Input file not found: {self.input_path}")

        try:
            with open(self.input_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse {self.input_path}: {e}") from e

        inputs = data.get("inputs") if isinstance(data, dict) else None
        if not isinstance(inputs, list):
            raise ValueError(f"{self.input_path} has no 'inputs' list")
        return inputs

    def convert(self) -> List[ConversionResult]:
        inputs = self._load_inputs()
        results: List[ConversionResult] = []

        for item in inputs:
            try:
                output = convert_one(item, self.mode, self.use_unicode)
                results.append(ConversionResult(input=item, output=output))
            except NumeralError as e:
                logger.warning(f"Failed to convert {item!r}: {e}")
                results.append(ConversionResult(input=item, error=str(e)))

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"Converted {len(results) - failed}/{len(results)} items from {self.input_path}")
        return results

    @staticmethod
    def dump(results: List[ConversionResult]) -> str:
        return yaml.safe_dump(
            {"results": [r.to_dict() for r in results]},
            allow_unicode=True,
            sort_keys=False,
        )

    def write(self, results: List[ConversionResult], output_path: Path):
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.dump(results))
