from filekit.tabular.models import NonEmptyRule, ProcessedRow, StaticRule, TagRule, ValueMatchRule
from filekit.tabular.processor import TabularProcessor
from filekit.tabular.sniffer import sniff_columns, sniff_headers

__all__ = [
    "NonEmptyRule",
    "ProcessedRow",
    "StaticRule",
    "TabularProcessor",
    "TagRule",
    "ValueMatchRule",
    "sniff_columns",
    "sniff_headers",
]
