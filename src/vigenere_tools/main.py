import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .alphabet import InvalidConfiguration
from .cipher import VigenereCipher
from .config import CipherConfig, load_config, save_config
from .history import log_event
from .shift import VARIANT_FORMULAS, VARIANT_LABELS, Variant
from .utils import read_text_file, write_text_file


def _setting_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "variant": args.variant,
        "key": args.key,
        "alphabet": args.alphabet,
        "case_sensitive": args.case_sensitive,
        "include_foreign_chars": args.include_foreign_chars,
    }


def _resolve_config(args: argparse.Namespace) -> CipherConfig:
    config_path = Path(args.config) if args.config else None
    return load_config(config_path, **_setting_overrides(args))


def _load_text(args: argparse.Namespace) -> str:
    if args.in_file:
        return read_text_file(Path(args.in_file), encoding=args.encoding)
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _run_translate(args: argparse.Namespace) -> Optional[str]:
    config = _resolve_config(args)
    cipher = VigenereCipher(config)
    text = _load_text(args)
    output = cipher.translate(text, is_encode=args.command == "encode")

    if not args.no_history:
        log_event(
            action=args.command,
            payload={
                "variant": config.variant,
                "case_sensitive": config.case_sensitive,
                "include_foreign_chars": config.include_foreign_chars,
                "in_file": args.in_file,
                "out_file": args.out_file,
                "input_length": len(text),
                "output_length": len(output),
            },
        )
    if args.out_file:
        write_text_file(Path(args.out_file), output)
        return None
    return output


def _run_config(args: argparse.Namespace) -> str:
    config = _resolve_config(args)
    if args.save:
        save_config(config, Path(args.config) if args.config else None)
        if not args.no_history:
            log_event(action="config", payload={"variant": config.variant, "saved": True})
    lines = [f"{name}: {value!r}" for name, value in config.to_dict().items()]
    if args.save:
        lines.append("Configuration saved.")
    return "\n".join(lines)


def _run_variants(args: argparse.Namespace) -> str:
    return "\n".join(
        f"{variant.value:<24} {VARIANT_LABELS[variant]:<24} {VARIANT_FORMULAS[variant]}"
        for variant in Variant
    )


def _add_setting_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        help="Shift rule (default: saved config, otherwise standard).",
    )
    p.add_argument("--key", help="Cipher key, at least 2 characters from the alphabet.")
    p.add_argument("--alphabet", help="Ordered set of characters to substitute within.")
    case = p.add_mutually_exclusive_group()
    case.add_argument(
        "--case-sensitive",
        dest="case_sensitive",
        action="store_const",
        const=True,
        help="Distinguish upper and lower case.",
    )
    case.add_argument(
        "--case-insensitive",
        dest="case_sensitive",
        action="store_const",
        const=False,
        help="Fold input, key and alphabet to lower case.",
    )
    foreign = p.add_mutually_exclusive_group()
    foreign.add_argument(
        "--include-foreign",
        dest="include_foreign_chars",
        action="store_const",
        const=True,
        help="Copy characters outside the alphabet to the output.",
    )
    foreign.add_argument(
        "--ignore-foreign",
        dest="include_foreign_chars",
        action="store_const",
        const=False,
        help="Drop characters outside the alphabet.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vigenere-tools",
        description="Vigenère, Beaufort and variant Beaufort cipher toolkit.",
    )
    parser.add_argument(
        "--no-history", action="store_true", help="Do not record the operation in history."
    )
    parser.add_argument(
        "--encoding",
        help="Encoding of --in-file (default: try utf-8, cp1252, latin-1).",
    )
    parser.add_argument("--config", help="Settings file (default: ~/.vigenere_tools.json).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for mode in ("encode", "decode"):
        mode_parser = subparsers.add_parser(mode, help=f"{mode.capitalize()} text")
        mode_parser.add_argument(
            "text", nargs="?", help="Input text (ignored if --in-file; stdin when omitted)."
        )
        mode_parser.add_argument("--in-file", help="Read input from file.")
        mode_parser.add_argument("--out-file", help="Write output to file instead of stdout.")
        _add_setting_args(mode_parser)
        mode_parser.set_defaults(func=_run_translate)

    config_parser = subparsers.add_parser("config", help="Show or update saved settings")
    _add_setting_args(config_parser)
    config_parser.add_argument(
        "--save", action="store_true", help="Persist the given settings to the config file."
    )
    config_parser.set_defaults(func=_run_config)

    variants_parser = subparsers.add_parser("variants", help="List available shift rules")
    variants_parser.set_defaults(func=_run_variants)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        result = args.func(args)
    except InvalidConfiguration as exc:
        parser.error(str(exc))
    except OSError as exc:
        parser.error(f"{exc.filename or 'file'}: {exc.strerror or exc}")
    if result is not None:
        print(result)


if __name__ == "__main__":
    main()
