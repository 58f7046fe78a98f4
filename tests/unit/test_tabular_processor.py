import asyncio
import csv
import io
import time
from collections.abc import Callable, Sequence
from unittest.mock import Mock

import pytest

from filekit.config.settings import Settings
from filekit.files.models import InputFile, OutputFile
from filekit.tabular.exceptions import EmptyResultError, ParseError
from filekit.tabular.models import NonEmptyRule, ProcessedRow, StaticRule, TagRule, ValueMatchRule
from filekit.tabular.processor import (
    DEFAULT_OUTPUT_FILENAME,
    TabularProcessor,
    build_tabular_processor,
)


def _read_output(output: OutputFile) -> list[dict[str, str]]:
    return list(csv.DictReader(io.StringIO(output.data.decode("utf-8"), newline="")))


def _process(files: Sequence[InputFile], rules: Sequence[TagRule] = ()) -> OutputFile:
    return asyncio.run(TabularProcessor().process(files, rules))


class TestProcessFile:
    def test_normalizes_row(self, csv_file: Callable[..., InputFile]) -> None:
        file = csv_file(
            "First Name,last_name,E-mail,Phone Number\n"
            " Ann , Lee ,ann@example.com,+1 (555) 123-4567.0\n"
        )
        rows = TabularProcessor().process_file(file, [StaticRule(tag="Lead")])
        assert rows == [
            ProcessedRow(
                user_id="15551234567",
                first_name="Ann",
                last_name="Lee",
                email="ann@example.com",
                phone="15551234567",
                tags="Lead",
            )
        ]

    def test_phone_is_the_inclusion_gate(self, csv_file: Callable[..., InputFile]) -> None:
        file = csv_file("name,phone\nAnn,555\nBob,\nCid,   \nDee,666\n")
        rows = TabularProcessor().process_file(file, [])
        assert [row.phone for row in rows] == ["555", "666"]

    def test_file_without_phone_column_yields_nothing(
        self, csv_file: Callable[..., InputFile]
    ) -> None:
        file = csv_file("name,email\nAnn,a@b.c\n")
        assert TabularProcessor().process_file(file, []) == []

    def test_unresolved_roles_are_empty(self, csv_file: Callable[..., InputFile]) -> None:
        (row,) = TabularProcessor().process_file(csv_file("mobile\n555\n"), [])
        assert (row.first_name, row.last_name, row.email) == ("", "", "")

    def test_user_id_column_is_superseded_by_phone(
        self, csv_file: Callable[..., InputFile]
    ) -> None:
        (row,) = TabularProcessor().process_file(csv_file("id,phone\n42,555-0100\n"), [])
        assert row.user_id == "5550100"

    def test_rules_see_raw_row(self, csv_file: Callable[..., InputFile]) -> None:
        file = csv_file("Phone,Plan,Notes\n(555) 010,Gold Annual,\n")
        rules: list[TagRule] = [
            ValueMatchRule(tag="Raw phone", column="Phone", match_value="(555)"),
            ValueMatchRule(tag="Gold", column="Plan", match_value="gold"),
            NonEmptyRule(tag="Has notes", column="Notes"),
        ]
        (row,) = TabularProcessor().process_file(file, rules)
        assert row.tags == "Raw phone, Gold"

    def test_first_of_repeated_phone_columns_gates(
        self, csv_file: Callable[..., InputFile]
    ) -> None:
        file = csv_file("First Name,Phone,Phone\nAnn,555-0100,\n")
        rows = TabularProcessor().process_file(file, [NonEmptyRule(tag="Alt", column="Phone_1")])
        assert [(r.first_name, r.phone, r.tags) for r in rows] == [("Ann", "5550100", "")]


class TestProcess:
    def test_combines_files_with_fixed_columns(
        self, csv_file: Callable[..., InputFile]
    ) -> None:
        first = csv_file("First Name,Phone\nAnn,555\n", name="a.csv")
        second = csv_file("email;mobile\nbob@example.com;666\n", name="b.csv")

        output = _process([first, second], [StaticRule(tag="Imported")])

        assert output.name == DEFAULT_OUTPUT_FILENAME
        assert output.data.decode("utf-8").splitlines()[0] == (
            "userId,firstName,lastName,email,phone,tags"
        )
        assert _read_output(output) == [
            {"userId": "555", "firstName": "Ann", "lastName": "", "email": "",
             "phone": "555", "tags": "Imported"},
            {"userId": "666", "firstName": "", "lastName": "", "email": "bob@example.com",
             "phone": "666", "tags": "Imported"},
        ]

    def test_quotes_embedded_delimiters(self, csv_file: Callable[..., InputFile]) -> None:
        file = csv_file('last name,phone\n"O\'Neil, Jr.",555\n')
        output = _process([file], [StaticRule(tag="A"), StaticRule(tag="B")])
        lines = output.data.decode("utf-8").splitlines()
        assert lines[1] == '555,,"O\'Neil, Jr.",,555,"A, B"'

    def test_no_rules_gives_empty_tags(self, csv_file: Callable[..., InputFile]) -> None:
        output = _process([csv_file("phone\n555\n")])
        assert _read_output(output)[0]["tags"] == ""

    def test_duplicates_are_kept(self, csv_file: Callable[..., InputFile]) -> None:
        file = csv_file("phone\n555\n555\n")
        assert len(_read_output(_process([file, file]))) == 4

    def test_empty_batch_raises(self, csv_file: Callable[..., InputFile]) -> None:
        first = csv_file("name,phone\nAnn,\n", name="a.csv")
        second = csv_file("name,phone\nBob,  \n", name="b.csv")
        with pytest.raises(EmptyResultError):
            _process([first, second])

    def test_no_files_raises(self) -> None:
        with pytest.raises(EmptyResultError):
            _process([])

    def test_parse_error_aborts_batch(self, csv_file: Callable[..., InputFile]) -> None:
        good = csv_file("phone\n555\n", name="good.csv")
        bad = csv_file('phone\n"555"x\n', name="bad.csv")
        with pytest.raises(ParseError, match="bad.csv"):
            _process([good, bad])

    def test_output_follows_submission_order_not_completion(
        self, csv_file: Callable[..., InputFile]
    ) -> None:
        completed: list[str] = []

        class SlowFirstProcessor(TabularProcessor):
            def process_file(
                self, file: InputFile, rules: Sequence[TagRule]
            ) -> list[ProcessedRow]:
                if file.name == "slow.csv":
                    time.sleep(0.2)
                rows = super().process_file(file, rules)
                completed.append(file.name)
                return rows

        slow = csv_file("phone\n111\n", name="slow.csv")
        fast = csv_file("phone\n222\n", name="fast.csv")

        output = asyncio.run(SlowFirstProcessor().process([slow, fast], []))

        assert completed == ["fast.csv", "slow.csv"]
        assert [row["phone"] for row in _read_output(output)] == ["111", "222"]


class TestBuildTabularProcessor:
    def test_uses_configured_filename(self, csv_file: Callable[..., InputFile]) -> None:
        settings = Mock(spec=Settings)
        settings.tabular_output_filename = "export.csv"
        processor = build_tabular_processor(settings)
        output = asyncio.run(processor.process([csv_file("phone\n1\n")], []))
        assert output.name == "export.csv"
