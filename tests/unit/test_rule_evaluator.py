from filekit.tabular.models import NonEmptyRule, StaticRule, ValueMatchRule
from filekit.tabular.rule_evaluator import evaluate_tags


class TestEvaluateTags:
    def test_mixed_rules_fire_in_order(self) -> None:
        row = {"X": "Foobar", "Phone": "555"}
        rules = [
            StaticRule(tag="A"),
            NonEmptyRule(tag="B", column="missing"),
            ValueMatchRule(tag="C", column="X", match_value="foo"),
        ]
        assert evaluate_tags(row, rules) == "A, C"

    def test_empty_rule_list(self) -> None:
        assert evaluate_tags({"a": "1"}, []) == ""

    def test_blank_tags_are_inert(self) -> None:
        rules = [StaticRule(tag=""), StaticRule(tag="   "), NonEmptyRule(tag=" ", column="a")]
        assert evaluate_tags({"a": "1"}, rules) == ""

    def test_tags_are_trimmed(self) -> None:
        assert evaluate_tags({}, [StaticRule(tag="  VIP  ")]) == "VIP"

    def test_duplicates_are_kept(self) -> None:
        rules = [StaticRule(tag="A"), StaticRule(tag="A")]
        assert evaluate_tags({}, rules) == "A, A"


class TestNonEmptyRule:
    def test_fires_on_value(self) -> None:
        assert evaluate_tags({"Notes": " hi "}, [NonEmptyRule(tag="N", column="Notes")]) == "N"

    def test_whitespace_value_does_not_fire(self) -> None:
        assert evaluate_tags({"Notes": "   "}, [NonEmptyRule(tag="N", column="Notes")]) == ""

    def test_missing_column_does_not_fire(self) -> None:
        assert evaluate_tags({}, [NonEmptyRule(tag="N", column="Notes")]) == ""

    def test_no_column_configured_does_not_fire(self) -> None:
        assert evaluate_tags({"Notes": "x"}, [NonEmptyRule(tag="N")]) == ""


class TestValueMatchRule:
    def test_case_insensitive_substring(self) -> None:
        rule = ValueMatchRule(tag="M", column="Plan", match_value=" GOLD ")
        assert evaluate_tags({"Plan": "Annual gold membership"}, [rule]) == "M"

    def test_no_match(self) -> None:
        rule = ValueMatchRule(tag="M", column="Plan", match_value="gold")
        assert evaluate_tags({"Plan": "silver"}, [rule]) == ""

    def test_missing_column_never_fires(self) -> None:
        rule = ValueMatchRule(tag="M", column="Plan", match_value="gold")
        assert evaluate_tags({"Other": "gold"}, [rule]) == ""

    def test_missing_match_value_never_fires(self) -> None:
        rule = ValueMatchRule(tag="M", column="Plan")
        assert evaluate_tags({"Plan": "gold"}, [rule]) == ""

    def test_blank_match_value_never_fires(self) -> None:
        rule = ValueMatchRule(tag="M", column="Plan", match_value="  ")
        assert evaluate_tags({"Plan": "gold"}, [rule]) == ""

    def test_missing_column_field_never_fires(self) -> None:
        rule = ValueMatchRule(tag="M", match_value="gold")
        assert evaluate_tags({"Plan": "gold"}, [rule]) == ""
