from __future__ import annotations

import unittest

from reqparam.core.binding import ParameterSpec, TargetKind, bind
from reqparam.core.http import group_query_items, parse_query_string


class ParseQueryStringTests(unittest.TestCase):
    def test_repeated_keys_keep_url_order(self) -> None:
        self.assertEqual(
            parse_query_string("city=Hyd&city=Pune&city=Delhi&sno=101"),
            {"city": ["Hyd", "Pune", "Delhi"], "sno": ["101"]},
        )

    def test_leading_question_mark_is_ignored(self) -> None:
        self.assertEqual(parse_query_string("?sno=101"), {"sno": ["101"]})

    def test_blank_values_are_kept(self) -> None:
        self.assertEqual(parse_query_string("age=&sname=John"), {"age": [""], "sname": ["John"]})

    def test_percent_encoding_is_decoded(self) -> None:
        self.assertEqual(
            parse_query_string("sname=John%20Doe&city=New+Delhi"),
            {"sname": ["John Doe"], "city": ["New Delhi"]},
        )

    def test_empty_query(self) -> None:
        self.assertEqual(parse_query_string(""), {})

    def test_group_query_items(self) -> None:
        items = [("a", "1"), ("b", "2"), ("a", "3")]
        self.assertEqual(group_query_items(items), {"a": ["1", "3"], "b": ["2"]})

    def test_parsed_query_feeds_the_binder(self) -> None:
        raw = parse_query_string("sname=John&age=")
        specs = [
            ParameterSpec("sno", TargetKind.SCALAR_INT, default_value="0"),
            ParameterSpec("sname", TargetKind.SCALAR_STRING),
            ParameterSpec("age", TargetKind.SCALAR_INTEGER_NULLABLE, required=False),
        ]
        self.assertEqual(bind(raw, specs), {"sno": 0, "sname": "John", "age": None})


if __name__ == "__main__":
    unittest.main()
