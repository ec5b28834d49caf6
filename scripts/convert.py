"""CLI for converting OBO/INI text to a JSON document and back"""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from oboini import EncodeOptions, decode, encode
from oboini.config import settings


def main(
    in_file: str,
    out_file: str | None,
    mode: str,
    section: str | None = None,
    whitespace: bool = settings.encode_whitespace,
    legacy_xref_labels: bool = settings.legacy_xref_labels,
) -> None:
    text = Path(in_file).read_text(encoding="utf-8")

    if mode == "decode":
        document = decode(text, legacy_xref_labels=legacy_xref_labels)
        output = json.dumps(document, indent=2, ensure_ascii=False) + "\n"
        logger.info(f"Decoded {in_file}: {len(document['xrefs'])} xrefs")
    else:
        document = json.loads(text)
        output = encode(
            document,
            EncodeOptions(section=section, whitespace=whitespace),
            eol=settings.eol,
        )
        logger.info(f"Encoded {in_file}")

    if out_file:
        Path(out_file).write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)


def build_parser(
    whitespace: bool = settings.encode_whitespace,
    legacy_xref_labels: bool = settings.legacy_xref_labels,
) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.add_argument("--in-file", type=str, required=True, help="Input OBO text or JSON file")
    parser.add_argument(
        "--out-file",
        type=str,
        required=False,
        help="Output file, stdout when omitted",
        default=None,
    )
    parser.add_argument(
        "--mode",
        choices=["decode", "encode"],
        default="decode",
        help="decode text to JSON or encode JSON to text",
    )
    parser.add_argument("--section", type=str, default=None, help="Root section name for encode")
    parser.add_argument(
        "--whitespace",
        action=argparse.BooleanOptionalAction,
        default=whitespace,
        help="Use ' = ' as separator when encoding",
    )
    parser.add_argument(
        "--legacy-xref-labels",
        action=argparse.BooleanOptionalAction,
        default=legacy_xref_labels,
        help="Label every xref target 'Xref' when decoding",
    )
    return parser


if __name__ == "__main__":
    logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

    args = build_parser().parse_args()

    main(
        in_file=args.in_file,
        out_file=args.out_file,
        mode=args.mode,
        section=args.section,
        whitespace=args.whitespace,
        legacy_xref_labels=args.legacy_xref_labels,
    )
