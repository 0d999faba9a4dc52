"""
Tests for core/batch.py - YAML 一括変換
"""
import pytest
import yaml
from numconv.core.batch import BatchConverter, ConversionResult, convert_one
from numconv.errors import InvalidCharacterError, NumeralError, OutOfRangeError


@pytest.fixture
def inputs_file(tmp_path):
    path = tmp_path / "inputs.yaml"
    path.write_text(
        "inputs:\n"
        "  - XIV\n"
        "  - 1999\n"
        "  - LXS\n"
        "  - 0\n",
        encoding="utf-8",
    )
    return path


class TestConvertOne:

    def test_roman_routing(self):
        assert convert_one("1999") == "MCMXCIX"
        assert convert_one(1999) == "MCMXCIX"
        assert convert_one("MCMXCIX") == "1999"

    def test_unicode(self):
        assert convert_one("1999", use_unicode=True) == "ⅯⅭⅯⅩⅭⅠⅩ"

    def test_japanese(self):
        assert convert_one(1994, mode="japanese") == "千九百九十四"

    def test_japanese_rejects_numeral(self):
        with pytest.raises(NumeralError):
            convert_one("XIV", mode="japanese")

    def test_errors_propagate(self):
        with pytest.raises(InvalidCharacterError):
            convert_one("LXS")
        with pytest.raises(OutOfRangeError):
            convert_one("4000")


class TestBatchConverter:

    def test_convert(self, inputs_file):
        results = BatchConverter(inputs_file).convert()
        assert [r.output for r in results] == ["14", "MCMXCIX", None, None]
        assert results[2].error == "Input contains invalid characters"
        assert results[3].error == "The value should be between 1 and 3999 inclusive, not 0"

    def test_failures_do_not_abort(self, inputs_file):
        results = BatchConverter(inputs_file).convert()
        assert len(results) == 4
        assert [r.ok for r in results] == [True, True, False, False]

    def test_japanese_mode(self, tmp_path):
        path = tmp_path / "inputs.yaml"
        path.write_text("inputs: [0, 100000]\n", encoding="utf-8")
        results = BatchConverter(path, mode="japanese").convert()
        assert [r.output for r in results] == ["零", "十万"]

    def test_write(self, inputs_file, tmp_path):
        converter = BatchConverter(inputs_file)
        results = converter.convert()
        output = tmp_path / "out" / "results.yaml"
        converter.write(results, output)

        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["results"][0] == {"input": "XIV", "output": "14"}
        assert data["results"][1] == {"input": 1999, "output": "MCMXCIX"}
        assert "error" in data["results"][2]

    def test_dump_keeps_unicode(self):
        text = BatchConverter.dump([ConversionResult(input=1994, output="千九百九十四")])
        assert "千九百九十四" in text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            BatchConverter(tmp_path / "missing.yaml").convert()

    def test_malformed_yaml(self, tmp_path):
        """YAML の構文エラーは ValueError として報告"""
        path = tmp_path / "inputs.yaml"
        path.write_text("inputs: [XIV\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to parse"):
            BatchConverter(path).convert()

    def test_no_inputs_list(self, tmp_path):
        path = tmp_path / "inputs.yaml"
        path.write_text("targets: []\n", encoding="utf-8")
        with pytest.raises(ValueError):
            BatchConverter(path).convert()

    def test_invalid_mode(self, inputs_file):
        with pytest.raises(ValueError):
            BatchConverter(inputs_file, mode="greek")
