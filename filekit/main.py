import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from filekit.config.settings import Settings
from filekit.files.file_loader import FileLoader
from filekit.files.file_writer import FileWriter
from filekit.image.formats import ImageFormat
from filekit.image.recompressor import build_recompressor
from filekit.logging.logger import Log
from filekit.pdf.factory import PdfMergerFactory
from filekit.pdf.merger import build_document_merger
from filekit.runner.job_runner import JobRunner
from filekit.tabular.models import TagRule
from filekit.tabular.processor import build_tabular_processor
from filekit.tabular.rule_builder import build_rules, default_rules
from filekit.tabular.sniffer import sniff_columns


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filekit",
        description="Normalize CSV exports, merge PDFs and recompress images locally.",
    )
    parser.add_argument(
        "--output-dir", type=Path, default=Path("."), help="Directory for output files"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    columns = commands.add_parser("columns", help="List column names of CSV files")
    columns.add_argument("files", nargs="+", type=Path)

    csv_cmd = commands.add_parser("csv", help="Normalize and tag CSV files into one export")
    csv_cmd.add_argument("files", nargs="+", type=Path)
    csv_cmd.add_argument("--rules", type=Path, help="JSON file with an ordered list of tag rules")

    pdf = commands.add_parser("pdf", help="Merge PDF files in the given order")
    pdf.add_argument("files", nargs="+", type=Path)
    pdf.add_argument("--pdf-engine", choices=PdfMergerFactory.engines())

    image = commands.add_parser("image", help="Recompress images under a byte budget")
    image.add_argument("files", nargs="+", type=Path)
    image.add_argument("--format", default=ImageFormat.JPEG, type=ImageFormat.parse)
    image.add_argument("--max-bytes", type=int, help="Byte budget per image")
    return parser


def load_rules(path: Path | None) -> list[TagRule]:
    """Read tag rules from a JSON file, or the default rule list when no path is given."""
    if path is None:
        return default_rules()
    return build_rules(json.loads(path.read_text(encoding="utf-8")))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse arguments -> configure -> run one operation."""
    args = build_parser().parse_args(argv)
    overrides = {"pdf_engine": args.pdf_engine} if getattr(args, "pdf_engine", None) else {}
    settings = Settings(**overrides)
    # stdout carries command output (e.g. column names), logs go to stderr.
    Log.configure(settings.log_level, stream=sys.stderr)

    loader = FileLoader()
    writer = FileWriter(args.output_dir)

    async def columns_job() -> None:
        for column in sniff_columns(loader.load_many(args.files)):
            print(column)

    async def csv_job() -> None:
        rules = load_rules(args.rules)
        processor = build_tabular_processor(settings)
        writer.write(await processor.process(loader.load_many(args.files), rules))

    async def pdf_job() -> None:
        merger = build_document_merger(settings)
        writer.write(await merger.merge(loader.load_many(args.files)))

    async def image_job() -> None:
        recompressor = build_recompressor(settings)
        files = loader.load_many(args.files)
        async for output in recompressor.recompress_batch(files, args.format, args.max_bytes):
            writer.write(output)

    jobs = {
        "columns": columns_job,
        "csv": csv_job,
        "pdf": pdf_job,
        "image": image_job,
    }
    ok = JobRunner().run(args.command, jobs[args.command])
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
