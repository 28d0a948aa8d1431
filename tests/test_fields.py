"""Tests for clash prefixing and key ordering."""

from logline.fields import field_keys, ordered_keys, prefix_field_clashes


class TestPrefixFieldClashes:
    def test_always_reserved_renamed(self):
        data = {"time": 1, "msg": 2, "level": 3, "error": 4, "other": 5}
        prefix_field_clashes(data, report_caller=False)
        assert data == {
            "fields.time": 1,
            "fields.msg": 2,
            "fields.level": 3,
            "fields.error": 4,
            "other": 5,
        }

    def test_caller_keys_untouched_without_caller(self):
        data = {"func": "f", "file": "x.py"}
        prefix_field_clashes(data, report_caller=False)
        assert data == {"func": "f", "file": "x.py"}

    def test_caller_keys_renamed_with_caller(self):
        data = {"func": "f", "file": "x.py"}
        prefix_field_clashes(data, report_caller=True)
        assert data == {"fields.func": "f", "fields.file": "x.py"}

    def test_taken_prefix_repeated(self):
        data = {"level": "mine", "fields.level": "theirs", "fields.fields.level": "other"}
        prefix_field_clashes(data, report_caller=False)
        assert data == {
            "fields.level": "theirs",
            "fields.fields.level": "other",
            "fields.fields.fields.level": "mine",
        }

    def test_values_never_dropped(self):
        sentinel = object()
        data = {"level": sentinel}
        prefix_field_clashes(data, report_caller=True)
        assert data["fields.level"] is sentinel

    def test_case_sensitive(self):
        data = {"Level": 1, "TIME": 2}
        prefix_field_clashes(data, report_caller=True)
        assert data == {"Level": 1, "TIME": 2}

    def test_empty_bag(self):
        data = {}
        prefix_field_clashes(data, report_caller=True)
        assert data == {}


class TestOrderedKeys:
    def test_fixed_columns_first(self):
        keys = ordered_keys({"b": 1, "a": 2}, include_time=True, message="hi")
        assert keys == ["time", "level", "msg", "a", "b"]

    def test_time_omitted_when_disabled(self):
        keys = ordered_keys({}, include_time=False, message="")
        assert keys == ["level"]

    def test_empty_message_has_no_column(self):
        keys = ordered_keys({"a": 1}, include_time=True, message="")
        assert "msg" not in keys

    def test_error_column_when_present(self):
        keys = ordered_keys({"error": "boom", "a": 1}, include_time=False, message="m")
        assert keys == ["level", "msg", "error", "a"]

    def test_empty_error_not_a_column(self):
        keys = ordered_keys({"error": "", "a": 1}, include_time=False, message="")
        assert keys == ["level", "a", "error"]

    def test_caller_columns(self):
        keys = ordered_keys(
            {"z": 1},
            include_time=True,
            message="m",
            function_text="handle()",
            file_text="app.py:3",
            report_caller=True,
        )
        assert keys == ["time", "level", "msg", "func", "file", "z"]

    def test_caller_columns_skip_empty_parts(self):
        keys = ordered_keys(
            {},
            include_time=False,
            message="",
            function_text="",
            file_text="app.py:3",
            report_caller=True,
        )
        assert keys == ["level", "file"]

    def test_caller_columns_need_report_caller(self):
        keys = ordered_keys(
            {}, include_time=False, message="", function_text="f()", file_text="a.py:1"
        )
        assert keys == ["level"]

    def test_unsorted_keeps_insertion_order(self):
        keys = ordered_keys(
            {"b": 1, "c": 2, "a": 3}, include_time=False, message="", sort_fields=False
        )
        assert keys == ["level", "b", "c", "a"]


class TestFieldKeys:
    def test_only_bag_keys(self):
        data = {"error": "e", "a": 1}
        keys = ["time", "level", "msg", "error", "func", "file", "a"]
        assert field_keys(keys, data) == ["error", "a"]

    def test_unreported_caller_names_are_fields(self):
        data = {"file": "x", "func": "f"}
        keys = ordered_keys(data, include_time=True, message="")
        assert field_keys(keys, data) == ["file", "func"]
