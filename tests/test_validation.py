from __future__ import annotations

import unittest

from reqparam.core.binding import ParameterSpec, TargetKind
from reqparam.core.validation import validate_spec, validate_specs


class ValidateSpecTests(unittest.TestCase):
    def test_accepts_valid_specs(self) -> None:
        validate_specs([
            ParameterSpec("sno", TargetKind.SCALAR_INT, default_value="0"),
            ParameterSpec("sname", TargetKind.SCALAR_STRING),
            ParameterSpec("page.size", TargetKind.SCALAR_INTEGER_NULLABLE, required=False),
            ParameterSpec("city[]", TargetKind.ORDERED_LIST_OF_STRING, target_name="cities"),
        ])

    def test_rejects_bad_source_names(self) -> None:
        for name in ("", "1abc", "has space", "a&b"):
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    validate_spec(ParameterSpec(name, TargetKind.SCALAR_STRING))

    def test_rejects_bad_target_name(self) -> None:
        with self.assertRaises(ValueError):
            validate_spec(ParameterSpec("sno", TargetKind.SCALAR_INT, target_name="not-valid"))

    def test_rejects_unknown_kind(self) -> None:
        with self.assertRaises(ValueError):
            validate_spec(ParameterSpec("sno", "scalar-float"))  # type: ignore[arg-type]

    def test_rejects_unparsable_numeric_default(self) -> None:
        for kind in (TargetKind.SCALAR_INT, TargetKind.SCALAR_INTEGER_NULLABLE):
            with self.subTest(kind=kind):
                with self.assertRaises(ValueError) as ctx:
                    validate_spec(ParameterSpec("sno", kind, default_value="none"))
                self.assertIn("sno", str(ctx.exception))

    def test_string_defaults_are_not_parsed(self) -> None:
        validate_spec(ParameterSpec("sname", TargetKind.SCALAR_STRING, default_value=""))

    def test_rejects_duplicate_result_keys(self) -> None:
        with self.assertRaises(ValueError):
            validate_specs([
                ParameterSpec("city", TargetKind.ORDERED_LIST_OF_STRING),
                ParameterSpec("city", TargetKind.UNIQUE_SET_OF_STRING),
            ])

    def test_same_source_under_different_keys_is_allowed(self) -> None:
        validate_specs([
            ParameterSpec("city", TargetKind.ORDERED_LIST_OF_STRING, target_name="city_list"),
            ParameterSpec("city", TargetKind.UNIQUE_SET_OF_STRING, target_name="city_set"),
        ])


if __name__ == "__main__":
    unittest.main()
