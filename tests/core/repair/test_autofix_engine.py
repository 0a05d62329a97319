"""Tests for the JSON autofix engine pipeline."""

import json
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from schema_autofix import AutofixConfig, JsonAutofixEngine, RepairResult, autofix_json


def parses(text):
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


class TestDocumentedRepairs:
    """Behaviour promised for the common hand-editing mistakes."""

    def test_strips_line_comment(self):
        result = autofix_json('{ "a": 1, // note\n "b": 2 }')

        assert json.loads(result.fixed) == {"a": 1, "b": 2}
        assert "Removed 1 single-line comment" in result.changes

    def test_quotes_unquoted_keys(self):
        result = autofix_json("{ a: 1, b: 2 }")

        assert json.loads(result.fixed) == {"a": 1, "b": 2}
        assert result.changes[0] == "Fixed 2 unquoted property names"

    def test_removes_trailing_comma(self):
        result = autofix_json('{"a":1,}')

        assert json.loads(result.fixed) == {"a": 1}
        assert "Removed 1 trailing comma" in result.changes

    def test_converts_single_quotes(self):
        result = autofix_json("{'a': 'x'}")

        assert json.loads(result.fixed) == {"a": "x"}
        assert "Replaced 4 single quotes with double quotes" in result.changes

    def test_apostrophe_inside_double_quotes_untouched(self):
        result = autofix_json('{"a": "it\'s fine"}')

        assert json.loads(result.fixed) == {"a": "it's fine"}
        assert result.changes == ["Reformatted JSON"]

    def test_unfixable_input_returns_normally(self):
        result = autofix_json("{{{")

        assert isinstance(result, RepairResult)
        assert result.fixed == "{{{"
        assert result.changes == []
        with pytest.raises(ValueError):
            json.loads(result.fixed)


class TestPipelineProperties:

    @pytest.mark.parametrize(
        "text",
        [
            '{ "a": 1, // note\n "b": 2 }',
            "{ a: 1, b: 2 }",
            "{'a': 'x', 'b': [1, 2,],}",
            "[{}, {name: 'x'}, {}]",
            '{\n  "a": "x"\n  "b": "y"\n  "c": "z",\n  "d": 1\n}',
            "[{,,}]",
            '{"a": [{ , }]}',
        ],
    )
    def test_second_run_changes_nothing(self, text):
        first = autofix_json(text)
        assert parses(first.fixed)

        second = autofix_json(first.fixed)

        assert second.changes == []
        assert second.fixed == first.fixed

    def test_valid_json_only_reformatted(self):
        text = '{"fields": [{"unique_id": "a", "order": 1}], "note": "x, y: z"}'

        result = autofix_json(text)

        assert json.loads(result.fixed) == json.loads(text)
        assert result.changes == ["Reformatted JSON"]

    def test_canonical_json_reports_nothing(self):
        text = json.dumps({"a": [1, 2], "b": {"c": None}}, indent=2)

        result = autofix_json(text)

        assert result.fixed == text
        assert result.changes == []
        assert result.summary() == "No auto-fixable issues found"

    def test_output_is_two_space_pretty_print(self):
        result = autofix_json("{a: [1, 2]}")

        assert result.fixed == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_changes_follow_pass_order(self):
        text = "\ufeff{a: 1, /* c */ 'b': [1,, 2],}"

        result = autofix_json(text)

        assert json.loads(result.fixed) == {"a": 1, "b": [1, 2]}
        assert result.changes == [
            "Removed BOM character",
            "Removed 1 multi-line comment",
            "Fixed 1 unquoted property name",
            "Removed 1 trailing comma",
            "Replaced 2 single quotes with double quotes",
            "Collapsed 1 run of consecutive commas",
            "Reformatted JSON",
        ]

    def test_non_ascii_kept_literal(self):
        result = autofix_json('{"name": "café"}')

        assert '"café"' in result.fixed

    def test_rejects_nan_like_a_browser(self):
        text = '{"a": NaN}'

        result = autofix_json(text)

        assert result.fixed == text
        assert result.changes == []

    def test_deep_nesting_does_not_raise(self):
        text = "[" * 100000

        result = autofix_json(text)

        assert result.fixed == text

    def test_non_string_input_is_type_error(self):
        with pytest.raises(TypeError):
            autofix_json(None)


class TestPassInteractions:
    """Characterization of overlapping malformations."""

    def test_missing_commas_between_lines(self):
        text = '{\n  "a": "x"\n  "b": "y"\n  "c": "z",\n  "d": 1\n}'

        result = autofix_json(text)

        assert json.loads(result.fixed) == {"a": "x", "b": "y", "c": "z", "d": 1}
        assert "Added 2 missing commas after lines 2, 3" in result.changes

    def test_missing_comma_before_closing_line_is_left(self):
        text = '[\n  {"a": 1}\n  {"b": 2}\n]'

        result = autofix_json(text)

        assert result.fixed == text
        assert result.changes == []

    def test_empty_objects_removed_from_arrays(self):
        result = autofix_json('[{}, {"a": 1}, {}, {}]')

        assert json.loads(result.fixed) == [{"a": 1}]
        assert "Removed 3 empty objects from arrays" in result.changes

    def test_only_empty_object(self):
        result = autofix_json("[{}]")

        assert json.loads(result.fixed) == []
        assert "Removed 1 empty object from arrays" in result.changes

    def test_trailing_then_dangling_comma(self):
        result = autofix_json("[1,,]")

        assert json.loads(result.fixed) == [1]
        assert result.changes == [
            "Removed 1 trailing comma",
            "Removed 1 comma before closing brackets",
            "Reformatted JSON",
        ]

    def test_trailing_comma_after_empty_object(self):
        result = autofix_json("[1, {},]")

        assert json.loads(result.fixed) == [1]
        assert result.changes == [
            "Removed 1 trailing comma",
            "Removed 1 empty object from arrays",
            "Reformatted JSON",
        ]

    def test_comma_cleanup_reruns_until_settled(self):
        result = autofix_json("[{,,}]")

        assert result.fixed == "[]"
        assert result.changes == [
            "Removed 1 trailing comma",
            "Removed 1 comma before closing brackets",
            "Removed 1 empty object from arrays",
        ]

    def test_block_key_touch_up_on_unrepaired_text(self):
        result = autofix_json('[{"formType": "text"}')

        assert result.fixed == '[{\n  "formType": "text"}'
        assert result.changes == ["Reformatted 1 known block key"]

    def test_comment_markers_inside_strings_survive(self):
        result = autofix_json("{'url': 'http://example.com/a'} // home")

        assert json.loads(result.fixed) == {"url": "http://example.com/a"}
        assert "Removed 1 single-line comment" in result.changes


class TestEngineConfiguration:

    def test_custom_indent(self):
        result = autofix_json('{"a":1}', config=AutofixConfig(indent=4))

        assert result.fixed == '{\n    "a": 1\n}'

    def test_pass_names_in_order(self):
        engine = JsonAutofixEngine()

        assert engine.pass_names() == [
            "bom_strip",
            "comment_removal",
            "unquoted_keys",
            "trailing_commas",
            "single_quotes",
            "empty_objects",
            "duplicate_commas",
            "dangling_commas",
            "missing_commas",
            "block_key_touch_up",
            "final_format",
        ]

    def test_custom_pass_list(self):
        from schema_autofix.core.repair.passes import TrailingCommaPass

        engine = JsonAutofixEngine(passes=[TrailingCommaPass()])
        result = engine.run("[1, 2,]")

        assert result.fixed == "[1, 2]"
        assert result.changes == ["Removed 1 trailing comma"]

    def test_logs_when_text_stays_invalid(self, caplog):
        with caplog.at_level(logging.INFO, logger="schema_autofix.core.repair.engine"):
            autofix_json('{"a": [1, 2}')

        assert "Text is still not valid JSON after autofix" in caplog.messages

    def test_no_invalid_log_for_repaired_text(self, caplog):
        with caplog.at_level(logging.INFO, logger="schema_autofix.core.repair.engine"):
            autofix_json("{a: 1,}")

        assert "Text is still not valid JSON after autofix" not in caplog.messages

    def test_concurrent_runs_are_independent(self):
        inputs = ["{a: %d,}" % i for i in range(50)]
        engine = JsonAutofixEngine()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(engine.run, inputs))

        for i, result in enumerate(results):
            assert json.loads(result.fixed) == {"a": i}
            assert result.changes == [
                "Fixed 1 unquoted property name",
                "Removed 1 trailing comma",
                "Reformatted JSON",
            ]
